"""Game state as read from the ledger."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from backend.models.board import Board, to_int
from backend.models.route import PIECE_COUNT

NO_BEST_MOVE_COUNT = 255

_REQUIRED_KEYS = ("mapSize", "walls", "robotPositions", "targetPosition", "targetRobot")

# snake_case field names of the on-chain Game object
_FIELD_KEYS = {
    "map_size": "mapSize",
    "walls": "walls",
    "robot_positions": "robotPositions",
    "target_position": "targetPosition",
    "target_robot": "targetRobot",
    "best_move_count": "bestMoveCount",
    "scores": "scores",
}


def _coerce(key: str, value: Any) -> int:
    try:
        return to_int(value)
    except ValueError as exc:
        raise ValueError(f"Game state field {key} is malformed: {exc}") from None


def _field(data: dict[str, Any], key: str, default: Any = None) -> int:
    return _coerce(key, data.get(key, default))


def _list_field(data: dict[str, Any], key: str, default: Any = None) -> list[Any]:
    value = data.get(key, default)
    if not isinstance(value, list):
        raise ValueError(
            f"Game state field {key} is malformed: expected a list, got {value!r}."
        )
    return value


def _ints(data: dict[str, Any], key: str, default: Any = None) -> list[int]:
    return [_coerce(key, v) for v in _list_field(data, key, default)]


def _unwrap_option(value: Any) -> Any:
    """Return the payload of an ``Option`` field, or a plain scalar as is.

    ``Option<u8>`` is serialised as ``{"fields": {"vec": [value]}}``; an
    empty ``vec`` means ``None``.
    """
    if not isinstance(value, dict):
        return value
    vec = (value.get("fields") or {}).get("vec") or []
    return vec[0] if vec else None


@dataclass(frozen=True)
class GameSnapshot:
    """One refresh of the on-chain game: board, pieces, and goal."""

    board: Board
    positions: tuple[int, ...]
    target_cell: int
    target_piece: int
    winner: int | None = None
    best_move_count: int = NO_BEST_MOVE_COUNT
    scores: tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if len(self.positions) != PIECE_COUNT:
            raise ValueError(
                f"Expected {PIECE_COUNT} piece positions, got {len(self.positions)}."
            )
        for cell in (*self.positions, self.target_cell):
            if not self.board.contains(cell):
                raise ValueError(
                    f"Cell {cell} is outside a {self.board.size}×{self.board.size} board."
                )
        if not 0 <= self.target_piece < PIECE_COUNT:
            raise ValueError(f"Target piece {self.target_piece} is outside 0..3.")

    # -- readers --------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameSnapshot:
        """Build a snapshot from the parsed, camelCase game object.

        Numbers may arrive as strings, the way the ledger's JSON-RPC
        encodes ``u64`` fields.
        """
        missing = [k for k in _REQUIRED_KEYS if k not in data]
        if missing:
            raise ValueError(f"Game state is missing {', '.join(missing)}.")

        winner = _unwrap_option(data.get("winner"))
        return cls(
            board=Board.from_walls(_field(data, "mapSize"), _list_field(data, "walls")),
            positions=tuple(_ints(data, "robotPositions")),
            target_cell=_field(data, "targetPosition"),
            target_piece=_field(data, "targetRobot"),
            winner=None if winner is None else _coerce("winner", winner),
            best_move_count=_field(data, "bestMoveCount", NO_BEST_MOVE_COUNT),
            scores=tuple(_ints(data, "scores", [])),
        )

    @classmethod
    def from_object(cls, obj: dict[str, Any]) -> GameSnapshot | None:
        """Build a snapshot from a raw ``getObject`` response.

        Returns ``None`` when the response carries no content, e.g. an
        unknown or deleted object.
        """
        fields = ((obj.get("data") or {}).get("content") or {}).get("fields")
        if not isinstance(fields, dict) or not fields:
            return None

        data: dict[str, Any] = {
            camel: fields[snake] for snake, camel in _FIELD_KEYS.items() if snake in fields
        }
        data["winner"] = fields.get("winner")
        return cls.from_dict(data)

    @classmethod
    def load(cls, path: Path) -> GameSnapshot:
        """Read a snapshot from a JSON file holding either representation."""
        data = json.loads(Path(path).read_text())
        if not isinstance(data, dict):
            raise ValueError(f"{path} does not hold a JSON object.")
        if "data" in data:
            snapshot = cls.from_object(data)
            if snapshot is None:
                raise ValueError(f"{path} holds an object response without content.")
            return snapshot
        return cls.from_dict(data)

    # -- queries --------------------------------------------------------------

    @property
    def best_move(self) -> int | None:
        if self.best_move_count == NO_BEST_MOVE_COUNT:
            return None
        return self.best_move_count

    def is_new_best(self, moves: int) -> bool:
        best = self.best_move
        return best is None or moves < best
