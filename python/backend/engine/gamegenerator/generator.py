"""Generates random demo games for offline play."""

from __future__ import annotations

import random

from backend.models.board import Board, Direction
from backend.models.route import PIECE_COUNT
from backend.models.snapshot import GameSnapshot

DEFAULT_SIZE = 16
MIN_SIZE = 3

_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class GameGenerator:
    """Creates boards with consistent walls and scattered pieces."""

    @staticmethod
    def generate(size: int = DEFAULT_SIZE, seed: int | None = None) -> GameSnapshot:
        """Return a random game of the given size.

        Every wall is declared on both cells it separates.  Boards of 8×8 and
        up get a walled-off central block that no piece or target uses.
        """
        if size < MIN_SIZE:
            raise ValueError(f"Board size must be at least {MIN_SIZE}, got {size}.")
        rng = random.Random(seed)
        grid = Board.empty(size)
        walls = [0] * grid.cell_count

        if size >= 8:
            GameGenerator._wall_center(grid, walls)

        free = [c for c in range(grid.cell_count) if not grid.is_center(c)]
        for _ in range(grid.cell_count // 16):
            cell = rng.choice(free)
            GameGenerator._add_wall(grid, walls, cell, rng.choice((Direction.UP, Direction.DOWN)))
            GameGenerator._add_wall(grid, walls, cell, rng.choice((Direction.LEFT, Direction.RIGHT)))

        cells = rng.sample(free, PIECE_COUNT + 1)
        return GameSnapshot(
            board=Board.from_walls(size, walls),
            positions=tuple(cells[:PIECE_COUNT]),
            target_cell=cells[PIECE_COUNT],
            target_piece=rng.randrange(PIECE_COUNT),
        )

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _add_wall(grid: Board, walls: list[int], cell: int, direction: Direction) -> None:
        walls[cell] |= direction.wall
        neighbour = grid.step(cell, direction)
        if neighbour is not None:
            walls[neighbour] |= _OPPOSITE[direction].wall

    @staticmethod
    def _wall_center(grid: Board, walls: list[int]) -> None:
        for cell in range(grid.cell_count):
            if not grid.is_center(cell):
                continue
            for direction in Direction:
                neighbour = grid.step(cell, direction)
                if neighbour is not None and not grid.is_center(neighbour):
                    GameGenerator._add_wall(grid, walls, cell, direction)
