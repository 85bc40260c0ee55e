"""Terminal route builder: cursor, click and board rendering."""

from __future__ import annotations

import pytest

from backend.engine.gameplay import RouteSession
from backend.models.board import Board, Direction
from backend.models.snapshot import GameSnapshot
from frontend.cli.rich.app import click_status, move_cursor, render_board


# -- cursor -------------------------------------------------------------------


@pytest.mark.parametrize(
    ("cursor", "direction", "expected"),
    [
        (0, Direction.UP, 0),
        (0, Direction.LEFT, 0),
        (0, Direction.RIGHT, 1),
        (0, Direction.DOWN, 16),
        (255, Direction.DOWN, 255),
        (255, Direction.RIGHT, 255),
        (17, Direction.UP, 1),
    ],
    ids=["top-edge", "left-edge", "right", "down", "bottom-edge", "right-edge", "up"],
)
def test_move_cursor(cursor: int, direction: Direction, expected: int) -> None:
    assert move_cursor(Board.empty(16), cursor, direction) == expected


def test_cursor_ignores_walls(snapshot: GameSnapshot) -> None:
    # cell 8 has an east wall; the cursor is not a piece
    assert move_cursor(snapshot.board, 8, Direction.RIGHT) == 9


# -- click --------------------------------------------------------------------


def test_click_adds_suggested_move(snapshot: GameSnapshot) -> None:
    session = RouteSession(snapshot)
    status = click_status(session, 2)
    assert "Added" in status
    assert session.route == [0, int(Direction.RIGHT)]


def test_click_follows_the_draft(snapshot: GameSnapshot) -> None:
    session = RouteSession(snapshot)
    session.push(Direction.DOWN)  # piece 0 stops on cell 6
    assert "Added" in click_status(session, 8)
    assert session.route == [0, 2, 0, 6]
    assert session.success is not None


@pytest.mark.parametrize("cursor", [7, 0], ids=["diagonal", "own-cell"])
def test_click_without_suggestion(snapshot: GameSnapshot, cursor: int) -> None:
    session = RouteSession(snapshot)
    assert "No move suggested" in click_status(session, cursor)
    assert session.route == []


# -- rendering ----------------------------------------------------------------


def test_render_cursor_on_empty_cell(snapshot: GameSnapshot) -> None:
    session = RouteSession(snapshot)
    plain = render_board(snapshot, session.result, cursor=14).plain
    assert plain.count("[ ]") == 1


def test_render_cursor_on_piece(snapshot: GameSnapshot) -> None:
    session = RouteSession(snapshot)
    plain = render_board(snapshot, session.result, cursor=0).plain
    assert "[●]" in plain
    assert plain.count(" ● ") == 3


def test_render_without_cursor(snapshot: GameSnapshot) -> None:
    session = RouteSession(snapshot)
    plain = render_board(snapshot, session.result).plain
    assert "[" not in plain
    assert plain.count(" ● ") == 4
