"""Replays a route of slide commands against a board."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from backend.engine.movement.resolver import SlideResolver
from backend.models.board import Board, Direction
from backend.models.route import PIECE_COUNT, parse_route

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Trace:
    """The cells one piece passed through during one slide."""

    piece: int
    start_cell: int
    end_cell: int
    direction: Direction
    visited: tuple[int, ...]


@dataclass(frozen=True)
class SimulationResult:
    final_positions: tuple[int, ...]
    traces: tuple[Trace, ...]

    def traces_for(self, piece: int) -> list[Trace]:
        return [t for t in self.traces if t.piece == piece]

    @property
    def moved(self) -> list[Trace]:
        """Traces whose piece actually changed cell."""
        return [t for t in self.traces if t.start_cell != t.end_cell]


class RouteSimulator:
    """Stateless simulator; all methods are static."""

    @staticmethod
    def simulate(
        board: Board,
        positions: Sequence[int],
        route: Sequence[int],
    ) -> SimulationResult:
        """Apply every move of *route* in order, starting from *positions*.

        Each move sees the resting cells left by all earlier moves.  The
        route is validated up front, so an invalid route raises
        ``InvalidRouteError`` without any move being resolved.  *positions*
        is never modified.
        """
        if len(positions) != PIECE_COUNT:
            raise ValueError(
                f"Expected {PIECE_COUNT} piece positions, got {len(positions)}."
            )
        moves = parse_route(route)

        working = list(positions)
        traces: list[Trace] = []
        for piece, direction in moves:
            start = working[piece]
            slide = SlideResolver.resolve(board, working, piece, direction)
            traces.append(
                Trace(
                    piece=piece,
                    start_cell=start,
                    end_cell=slide.end_cell,
                    direction=direction,
                    visited=slide.visited,
                )
            )
            working[piece] = slide.end_cell

        logger.debug("simulated %d moves, final positions %s", len(traces), working)
        return SimulationResult(final_positions=tuple(working), traces=tuple(traces))
