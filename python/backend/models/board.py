"""Board model for Ricochet Robots."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag


class Wall(IntFlag):
    NORTH = 1
    SOUTH = 2
    WEST = 4
    EAST = 8


class Direction(IntEnum):
    """Slide direction, valued by the ledger's numeric codes."""

    UP = 8
    DOWN = 2
    LEFT = 4
    RIGHT = 6

    @property
    def wall(self) -> Wall:
        """The wall on the departure cell that blocks this slide."""
        return _BLOCKING_WALL[self]

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_BLOCKING_WALL = {
    Direction.UP: Wall.NORTH,
    Direction.DOWN: Wall.SOUTH,
    Direction.LEFT: Wall.WEST,
    Direction.RIGHT: Wall.EAST,
}

_OFFSETS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_SYMBOLS = {
    Direction.UP: "↑",
    Direction.DOWN: "↓",
    Direction.LEFT: "←",
    Direction.RIGHT: "→",
}

MAX_WALL_MASK = 15


def to_int(value: object) -> int:
    """Convert an integral number or a decimal string, rejecting anything else.

    The ledger's JSON encodes large integers as strings, so ``"12"`` is
    accepted; ``3.7``, ``True`` and ``None`` are not.
    """
    if isinstance(value, bool):
        raise ValueError(f"Expected an integer, got {value!r}.")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if text.lstrip("-").isdigit():
            return int(text)
    raise ValueError(f"Expected an integer, got {value!r}.")


@dataclass(frozen=True)
class Board:
    """Square grid with a wall bitmask per cell.

    Cells are indexed row-major from ``0`` to ``size * size - 1``.  Walls
    are read from the cell a piece is *leaving*; neighbouring cells are not
    required to agree on the wall between them.
    """

    size: int
    walls: tuple[int, ...]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_walls(cls, size: int, walls: list[int] | tuple[int, ...] = ()) -> Board:
        """Create a board, padding missing trailing masks with ``0``.

        Example::

            Board.from_walls(4, [0, 8, 0, 0, 2])
        """
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}.")
        cells = size * size
        if len(walls) > cells:
            raise ValueError(
                f"Expected at most {cells} wall masks for a {size}×{size} "
                f"board, got {len(walls)}."
            )
        masks: list[int] = []
        for cell, raw in enumerate(walls):
            try:
                masks.append(to_int(raw))
            except ValueError:
                raise ValueError(f"Wall mask {raw!r} at cell {cell} is not an integer.") from None
        masks.extend([0] * (cells - len(walls)))
        for cell, mask in enumerate(masks):
            if not 0 <= mask <= MAX_WALL_MASK:
                raise ValueError(
                    f"Wall mask {mask} at cell {cell} is outside 0..{MAX_WALL_MASK}."
                )
        return cls(size=size, walls=tuple(masks))

    @classmethod
    def empty(cls, size: int) -> Board:
        return cls.from_walls(size)

    # -- geometry -------------------------------------------------------------

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    def contains(self, cell: int) -> bool:
        return 0 <= cell < self.cell_count

    def row(self, cell: int) -> int:
        return cell // self.size

    def col(self, cell: int) -> int:
        return cell % self.size

    def cell_at(self, row: int, col: int) -> int:
        return row * self.size + col

    def step(self, cell: int, direction: Direction) -> int | None:
        """Return the neighbour of *cell* in *direction*, or ``None`` off-grid."""
        dr, dc = direction.offset
        r, c = self.row(cell) + dr, self.col(cell) + dc
        if not (0 <= r < self.size and 0 <= c < self.size):
            return None
        return self.cell_at(r, c)

    # -- walls ----------------------------------------------------------------

    def wall_mask(self, cell: int) -> int:
        return self.walls[cell]

    def has_wall(self, cell: int, edge: Wall) -> bool:
        return bool(self.walls[cell] & edge)

    def is_center(self, cell: int) -> bool:
        """Check if *cell* lies in the central 4×4 block (rows/cols 6..9 on 16×16)."""
        if self.size < 8:
            return False
        lo = self.size // 2 - 2
        hi = self.size // 2 + 1
        return lo <= self.row(cell) <= hi and lo <= self.col(cell) <= hi
