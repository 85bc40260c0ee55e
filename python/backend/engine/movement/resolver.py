"""Resolves where a single piece comes to rest after one slide."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from backend.models.board import Board, Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Slide:
    end_cell: int
    visited: tuple[int, ...]


class SlideResolver:
    """Stateless resolver; all methods are static."""

    @staticmethod
    def resolve(
        board: Board,
        positions: Sequence[int],
        piece: int,
        direction: Direction,
    ) -> Slide:
        """Slide *piece* in *direction* until an edge, wall, or piece stops it.

        *positions* are the current cells of all pieces.  Only the wall mask
        of the cell being left is consulted at each step.  A piece that is
        blocked straight away yields ``visited == (start,)``.
        """
        current = positions[piece]
        visited = [current]

        while True:
            if board.has_wall(current, direction.wall):
                break
            candidate = board.step(current, direction)
            if candidate is None:
                break
            if SlideResolver._occupied(positions, piece, candidate):
                break
            current = candidate
            visited.append(current)

        logger.debug(
            "piece %d %s: %d -> %d (%d cells)",
            piece, direction.name, visited[0], current, len(visited),
        )
        return Slide(end_cell=current, visited=tuple(visited))

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _occupied(positions: Sequence[int], piece: int, cell: int) -> bool:
        return any(pos == cell for idx, pos in enumerate(positions) if idx != piece)
