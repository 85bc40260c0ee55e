"""Route under construction: the player's draft before submission."""

from __future__ import annotations

import logging

from backend.engine.analysis import RouteAnalyzer, RouteDisplay, RouteSuccess
from backend.engine.movement import RouteSimulator, SimulationResult
from backend.models.board import Direction
from backend.models.route import PIECE_COUNT, InvalidRouteError, Move, route_payload
from backend.models.snapshot import GameSnapshot

logger = logging.getLogger(__name__)


class RouteSession:
    """Holds the draft route for one loaded game.

    The route is kept in its flat ledger form.  Derived data (simulation,
    success, display) is recomputed from it on every access.
    """

    def __init__(self, snapshot: GameSnapshot) -> None:
        self.snapshot = snapshot
        self.route: list[int] = []
        self.selected_piece: int = snapshot.target_piece

    def reload(self, snapshot: GameSnapshot) -> None:
        """Replace the game state; the draft no longer applies and is dropped."""
        self.snapshot = snapshot
        self.clear()
        self.selected_piece = snapshot.target_piece

    # -- editing --------------------------------------------------------------

    def select(self, piece: int) -> None:
        if not 0 <= piece < PIECE_COUNT:
            raise ValueError(f"Piece index {piece} is outside 0..{PIECE_COUNT - 1}.")
        self.selected_piece = piece

    def push(self, direction: Direction, piece: int | None = None) -> Move:
        """Append a move for *piece* (the selected piece by default)."""
        if piece is None:
            piece = self.selected_piece
        move = Move(piece, Direction(direction))
        self.route.extend((move.piece, int(move.direction)))
        return move

    def click(self, cell: int) -> Move | None:
        """Append the move suggested by clicking *cell*, if there is one."""
        move = RouteAnalyzer.suggest_move(
            self.snapshot, self.route, self.selected_piece, cell
        )
        if move is not None:
            self.push(move.direction, move.piece)
        return move

    def undo(self) -> Move | None:
        """Remove the last move."""
        if not self.route:
            return None
        piece, code = self.route[-2:]
        del self.route[-2:]
        return Move(piece, Direction(code))

    def clear(self) -> None:
        self.route.clear()

    # -- queries --------------------------------------------------------------

    @property
    def move_count(self) -> int:
        return len(self.route) // 2

    @property
    def result(self) -> SimulationResult:
        return RouteSimulator.simulate(
            self.snapshot.board, self.snapshot.positions, self.route
        )

    @property
    def success(self) -> RouteSuccess | None:
        return RouteAnalyzer.check_success(self.snapshot, self.route)

    @property
    def display(self) -> RouteDisplay:
        return RouteAnalyzer.render_route(self.route)

    def payload(self) -> bytes:
        """Return the route as the ledger payload."""
        if not self.route:
            raise InvalidRouteError("Cannot submit an empty route.")
        payload = route_payload(self.route)
        logger.info("prepared route of %d moves for submission", self.move_count)
        return payload
