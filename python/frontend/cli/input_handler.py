"""Single-keypress reader for the route builder.

Handles arrow keys, WASD, IJKL cursor keys, piece digits and editing
keys without requiring Enter.  Works on macOS / Linux (tty+termios) and
Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- key mapping ---------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "i": "cursor_up",
    "k": "cursor_down",
    "j": "cursor_left",
    "l": "cursor_right",
    "\t": "next",
    "u": "undo",
    "\x7f": "undo",  # Backspace
    "c": "clear",
    "n": "new",
    "p": "payload",
    "h": "help",
    "?": "help",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "\r": "enter",
    "\n": "enter",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def resolve_key(ch: str) -> str:
    """Map a raw character to its action string."""
    if ch in _KEY_MAP:
        return _KEY_MAP[ch]
    lower = ch.lower()
    if lower in _KEY_MAP and lower.isalpha():
        return _KEY_MAP[lower]
    if ch and ch in "1234":
        return f"piece{int(ch) - 1}"
    return ""


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "up", "down", "left", "right"  slide the selected piece
        "piece0" .. "piece3"           select a piece (keys 1-4)
        "next"                         Tab, cycle the selected piece
        "cursor_up" .. "cursor_right"  IJKL, move the board cursor
        "enter"                        add the move toward the cursor
        "undo", "clear"                edit the route
        "new"                          generate a new demo game
        "payload"                      show the ledger payload
        "help", "quit"
        ""                             unrecognised key
    """
    ch = _getch()

    # Arrow keys (Unix escape sequences: ESC [ A/B/C/D)
    if ch == "\x1b":
        ch2 = _getch()
        if ch2 == "[":
            ch3 = _getch()
            return _ARROW_MAP.get(ch3, "")
        return "quit"  # bare Escape

    return resolve_key(ch)
