"""Move commands and the flat route encoding submitted to the ledger."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import NamedTuple

from backend.models.board import Direction

PIECE_COUNT = 4
PIECE_NAMES = ("Red", "Green", "Blue", "Yellow")
PIECE_SYMBOLS = ("🔴", "🟢", "🔵", "🟡")


class InvalidRouteError(ValueError):
    """Raised for a route that cannot be replayed as given."""


class Move(NamedTuple):
    piece: int
    direction: Direction

    def __str__(self) -> str:
        return f"{PIECE_SYMBOLS[self.piece]}{self.direction.symbol}"


def parse_route(route: Sequence[int]) -> list[Move]:
    """Split a flat ``[piece, direction, piece, direction, ...]`` route into moves.

    The whole route is validated before anything is returned.
    """
    if len(route) % 2:
        raise InvalidRouteError(
            f"Route must alternate piece and direction, got odd length {len(route)}."
        )
    moves: list[Move] = []
    for i in range(0, len(route), 2):
        piece, code = route[i], route[i + 1]
        if not 0 <= piece < PIECE_COUNT:
            raise InvalidRouteError(
                f"Move {i // 2}: piece index {piece} is outside 0..{PIECE_COUNT - 1}."
            )
        try:
            direction = Direction(code)
        except ValueError:
            raise InvalidRouteError(
                f"Move {i // 2}: unknown direction code {code}."
            ) from None
        moves.append(Move(piece, direction))
    return moves


def encode_route(moves: Iterable[Move]) -> list[int]:
    """Flatten moves back into the ledger's alternating integer form."""
    flat: list[int] = []
    for piece, direction in moves:
        flat.extend((int(piece), int(direction)))
    return flat


def route_payload(route: Sequence[int]) -> bytes:
    """Return the unsigned 8-bit payload for a ``submit_route`` call."""
    parse_route(route)
    return bytes(route)
