from __future__ import annotations

from pathlib import Path

import pytest

from backend.models.board import Board
from backend.models.snapshot import GameSnapshot

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def snapshot() -> GameSnapshot:
    """6×6 game: piece 0 wins with DOWN, RIGHT (0 → 6 → 8)."""
    return GameSnapshot.load(FIXTURES_DIR / "game_state.json")


@pytest.fixture
def empty16() -> Board:
    return Board.empty(16)
