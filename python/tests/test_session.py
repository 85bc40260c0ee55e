"""Route session: editing the draft route the way the UI does."""

from __future__ import annotations

import pytest

from backend.engine.analysis import NO_ROUTE, RouteSuccess
from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameplay import RouteSession
from backend.models.board import Direction
from backend.models.route import InvalidRouteError, Move
from backend.models.snapshot import GameSnapshot


@pytest.fixture
def session(snapshot: GameSnapshot) -> RouteSession:
    return RouteSession(snapshot)


def test_starts_empty_on_target_piece(session: RouteSession) -> None:
    assert session.route == []
    assert session.selected_piece == 0
    assert session.display is NO_ROUTE
    assert session.success is None
    assert session.result.final_positions == (0, 5, 30, 35)


def test_push_uses_selected_piece(session: RouteSession) -> None:
    session.select(2)
    assert session.push(Direction.RIGHT) == Move(2, Direction.RIGHT)
    assert session.route == [2, 6]
    assert session.result.final_positions[2] == 35 - 1


def test_push_for_explicit_piece(session: RouteSession) -> None:
    session.push(Direction.DOWN, piece=1)
    assert session.route == [1, 2]
    assert session.selected_piece == 0


def test_build_winning_route_by_clicking(session: RouteSession) -> None:
    assert session.push(Direction.DOWN) == Move(0, Direction.DOWN)
    assert session.click(8) == Move(0, Direction.RIGHT)
    assert session.route == [0, 2, 0, 6]
    assert session.move_count == 2
    assert session.success == RouteSuccess(moves=2, piece=0, position=8)
    assert str(session.display) == "🔴↓ 🔴→ (2 moves)"


def test_diagonal_click_adds_nothing(session: RouteSession) -> None:
    assert session.click(7) is None
    assert session.route == []


def test_undo_removes_last_move(session: RouteSession) -> None:
    session.push(Direction.DOWN)
    session.push(Direction.RIGHT)
    assert session.undo() == Move(0, Direction.RIGHT)
    assert session.route == [0, 2]
    assert session.result.final_positions[0] == 6
    assert session.undo() == Move(0, Direction.DOWN)
    assert session.undo() is None


def test_clear(session: RouteSession) -> None:
    session.push(Direction.DOWN)
    session.clear()
    assert session.route == []


def test_select_out_of_range(session: RouteSession) -> None:
    with pytest.raises(ValueError):
        session.select(4)


def test_payload(session: RouteSession) -> None:
    session.push(Direction.DOWN)
    session.push(Direction.RIGHT)
    assert session.payload() == bytes([0, 2, 0, 6])


def test_empty_payload_rejected(session: RouteSession) -> None:
    with pytest.raises(InvalidRouteError, match="empty"):
        session.payload()


def test_reload_drops_draft(session: RouteSession) -> None:
    session.push(Direction.DOWN)
    fresh = GameGenerator.generate(16, seed=3)
    session.reload(fresh)
    assert session.snapshot is fresh
    assert session.route == []
    assert session.selected_piece == fresh.target_piece
