"""Read-only queries over a route and the game it is played on.

Every query accepts ``snapshot=None`` (no game loaded yet) and answers with
a neutral value instead of raising.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from backend.engine.movement import RouteSimulator
from backend.models.board import Direction
from backend.models.route import PIECE_COUNT, PIECE_SYMBOLS, Move, parse_route
from backend.models.snapshot import GameSnapshot


@dataclass(frozen=True)
class RouteSuccess:
    moves: int
    piece: int
    position: int


@dataclass(frozen=True)
class RouteDisplay:
    """Formatted route: ``(piece_symbol, direction_symbol)`` pairs."""

    moves: tuple[tuple[str, str], ...]
    move_count: int

    @property
    def is_empty(self) -> bool:
        return self.move_count == 0

    def __str__(self) -> str:
        if self.is_empty:
            return "—"
        text = " ".join(p + d for p, d in self.moves)
        noun = "move" if self.move_count == 1 else "moves"
        return f"{text} ({self.move_count} {noun})"


NO_ROUTE = RouteDisplay(moves=(), move_count=0)


@dataclass(frozen=True)
class PieceHistory:
    piece: int
    start_cell: int
    end_cell: int
    slides: tuple[tuple[Direction, int], ...] = field(default_factory=tuple)

    @property
    def move_count(self) -> int:
        return len(self.slides)


class RouteAnalyzer:
    """Stateless analyzer; all methods are static."""

    @staticmethod
    def check_success(
        snapshot: GameSnapshot | None, route: Sequence[int]
    ) -> RouteSuccess | None:
        """Return the win summary if *route* brings the target piece home."""
        if snapshot is None or not route:
            return None

        result = RouteSimulator.simulate(snapshot.board, snapshot.positions, route)
        if result.final_positions[snapshot.target_piece] != snapshot.target_cell:
            return None
        return RouteSuccess(
            moves=len(route) // 2,
            piece=snapshot.target_piece,
            position=snapshot.target_cell,
        )

    @staticmethod
    def infer_direction(current: int, target: int, size: int) -> Direction | None:
        """Single-step direction from *current* toward a clicked *target* cell.

        Only cells sharing a row or a column give a direction; diagonal or
        identical cells give ``None``.
        """
        cur_row, cur_col = divmod(current, size)
        tgt_row, tgt_col = divmod(target, size)

        if tgt_col == cur_col:
            if tgt_row < cur_row:
                return Direction.UP
            if tgt_row > cur_row:
                return Direction.DOWN
        if tgt_row == cur_row:
            if tgt_col < cur_col:
                return Direction.LEFT
            if tgt_col > cur_col:
                return Direction.RIGHT
        return None

    @staticmethod
    def suggest_move(
        snapshot: GameSnapshot | None,
        route: Sequence[int],
        piece: int,
        clicked: int,
    ) -> Move | None:
        """Move that sends *piece* toward *clicked* from where *route* leaves it."""
        if snapshot is None:
            return None
        if not 0 <= piece < PIECE_COUNT:
            raise ValueError(f"Piece index {piece} is outside 0..{PIECE_COUNT - 1}.")

        result = RouteSimulator.simulate(snapshot.board, snapshot.positions, route)
        direction = RouteAnalyzer.infer_direction(
            result.final_positions[piece], clicked, snapshot.board.size
        )
        if direction is None:
            return None
        return Move(piece, direction)

    @staticmethod
    def render_route(route: Sequence[int] | None) -> RouteDisplay:
        if not route:
            return NO_ROUTE

        moves = parse_route(route)
        return RouteDisplay(
            moves=tuple((PIECE_SYMBOLS[m.piece], m.direction.symbol) for m in moves),
            move_count=len(moves),
        )

    @staticmethod
    def piece_histories(
        snapshot: GameSnapshot | None, route: Sequence[int]
    ) -> list[PieceHistory]:
        """Per-piece start cell, simulated end cell, and slides taken."""
        if snapshot is None:
            return []

        result = RouteSimulator.simulate(snapshot.board, snapshot.positions, route)
        return [
            PieceHistory(
                piece=piece,
                start_cell=snapshot.positions[piece],
                end_cell=result.final_positions[piece],
                slides=tuple((t.direction, t.end_cell) for t in result.traces_for(piece)),
            )
            for piece in range(PIECE_COUNT)
        ]
