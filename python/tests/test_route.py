"""Route encoding: parsing, validation, and the ledger payload."""

from __future__ import annotations

import pytest

from backend.models.board import Direction
from backend.models.route import InvalidRouteError, Move, encode_route, parse_route, route_payload


def test_parse_route_pairs_piece_and_direction() -> None:
    assert parse_route([0, 6, 3, 8]) == [Move(0, Direction.RIGHT), Move(3, Direction.UP)]


def test_parse_empty_route() -> None:
    assert parse_route([]) == []


def test_encode_route_flattens_moves() -> None:
    moves = [Move(2, Direction.DOWN), Move(1, Direction.LEFT)]
    assert encode_route(moves) == [2, 2, 1, 4]
    assert parse_route(encode_route(moves)) == moves


@pytest.mark.parametrize(
    ("route", "message"),
    [
        ([0], "odd length"),
        ([0, 6, 1], "odd length"),
        ([4, 6], "piece index 4"),
        ([-1, 6], "piece index -1"),
        ([0, 5], "direction code 5"),
        ([0, 6, 1, 0], "Move 1"),
    ],
    ids=["single", "three", "piece-4", "piece-neg", "dir-5", "second-move"],
)
def test_invalid_routes(route: list[int], message: str) -> None:
    with pytest.raises(InvalidRouteError, match=message):
        parse_route(route)


def test_invalid_route_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        parse_route([9, 9])


def test_route_payload_is_raw_u8() -> None:
    assert route_payload([0, 6, 0, 2]) == b"\x00\x06\x00\x02"
    assert route_payload([]) == b""


def test_route_payload_validates() -> None:
    with pytest.raises(InvalidRouteError):
        route_payload([0, 7])


def test_move_str_uses_symbols() -> None:
    assert str(Move(0, Direction.RIGHT)) == "🔴→"
    assert str(Move(3, Direction.UP)) == "🟡↑"
