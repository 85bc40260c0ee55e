"""Board model: construction, geometry, and wall queries."""

from __future__ import annotations

import pytest

from backend.models.board import Board, Direction, Wall


# -- construction -------------------------------------------------------------


def test_missing_masks_are_padded_with_zero() -> None:
    board = Board.from_walls(4, [0, 8, 0, 0, 2])
    assert len(board.walls) == 16
    assert board.walls[:5] == (0, 8, 0, 0, 2)
    assert set(board.walls[5:]) == {0}


def test_numeric_strings_are_accepted() -> None:
    board = Board.from_walls(2, ["1", "15"])
    assert board.walls == (1, 15, 0, 0)


@pytest.mark.parametrize("mask", [-1, 16, 255])
def test_out_of_range_mask_rejected(mask: int) -> None:
    with pytest.raises(ValueError, match="outside 0..15"):
        Board.from_walls(3, [0, mask])


def test_too_many_masks_rejected() -> None:
    with pytest.raises(ValueError, match="at most 4"):
        Board.from_walls(2, [0] * 5)


@pytest.mark.parametrize("size", [0, -3])
def test_non_positive_size_rejected(size: int) -> None:
    with pytest.raises(ValueError):
        Board.from_walls(size)


# -- geometry -----------------------------------------------------------------


def test_row_col_decomposition(empty16: Board) -> None:
    assert (empty16.row(0), empty16.col(0)) == (0, 0)
    assert (empty16.row(17), empty16.col(17)) == (1, 1)
    assert (empty16.row(255), empty16.col(255)) == (15, 15)
    assert empty16.cell_at(12, 8) == 200


@pytest.mark.parametrize(
    ("cell", "direction", "expected"),
    [
        (0, Direction.UP, None),
        (0, Direction.LEFT, None),
        (0, Direction.RIGHT, 1),
        (0, Direction.DOWN, 16),
        (15, Direction.RIGHT, None),
        (16, Direction.LEFT, None),
        (255, Direction.DOWN, None),
        (255, Direction.UP, 239),
    ],
    ids=lambda v: str(v),
)
def test_step_stops_at_edges(empty16: Board, cell: int, direction: Direction, expected) -> None:
    assert empty16.step(cell, direction) == expected


def test_contains(empty16: Board) -> None:
    assert empty16.contains(0)
    assert empty16.contains(255)
    assert not empty16.contains(256)
    assert not empty16.contains(-1)


# -- walls --------------------------------------------------------------------


def test_has_wall_reads_bits() -> None:
    board = Board.from_walls(2, [Wall.NORTH | Wall.EAST])
    assert board.has_wall(0, Wall.NORTH)
    assert board.has_wall(0, Wall.EAST)
    assert not board.has_wall(0, Wall.SOUTH)
    assert not board.has_wall(0, Wall.WEST)
    assert not board.has_wall(1, Wall.WEST)


def test_direction_codes_and_blocking_walls() -> None:
    assert Direction(8) is Direction.UP
    assert Direction(2) is Direction.DOWN
    assert Direction(4) is Direction.LEFT
    assert Direction(6) is Direction.RIGHT
    assert [d.wall for d in Direction] == [Wall.NORTH, Wall.SOUTH, Wall.WEST, Wall.EAST]


def test_center_block(empty16: Board) -> None:
    assert empty16.is_center(empty16.cell_at(6, 6))
    assert empty16.is_center(empty16.cell_at(9, 9))
    assert not empty16.is_center(empty16.cell_at(5, 6))
    assert not empty16.is_center(empty16.cell_at(6, 10))
    assert not any(Board.empty(6).is_center(c) for c in range(36))


@pytest.mark.parametrize("mask", [3.7, True, None, "x", "1.5"], ids=["float", "bool", "none", "word", "decimal"])
def test_non_integral_mask_rejected(mask) -> None:
    with pytest.raises(ValueError, match="not an integer"):
        Board.from_walls(3, [0, mask])


def test_integral_float_mask_accepted() -> None:
    assert Board.from_walls(2, [8.0]).walls == (8, 0, 0, 0)
