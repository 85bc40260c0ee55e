"""Key mapping for the terminal route builder."""

from __future__ import annotations

import pytest

from frontend.cli.input_handler import resolve_key


@pytest.mark.parametrize(
    ("ch", "action"),
    [
        ("w", "up"),
        ("S", "down"),
        ("a", "left"),
        ("D", "right"),
        ("1", "piece0"),
        ("4", "piece3"),
        ("\t", "next"),
        ("u", "undo"),
        ("\x7f", "undo"),
        ("C", "clear"),
        ("i", "cursor_up"),
        ("K", "cursor_down"),
        ("j", "cursor_left"),
        ("l", "cursor_right"),
        ("\r", "enter"),
        ("h", "help"),
        ("?", "help"),
        ("q", "quit"),
        ("\x03", "quit"),
        ("5", ""),
        ("z", ""),
        ("", ""),
    ],
)
def test_resolve_key(ch: str, action: str) -> None:
    assert resolve_key(ch) == action
