"""Single-keypress reader for the terminal frontend.

Arrow keys, WASD and tile digits are read without requiring Enter.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        return sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


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
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "x": "shuffle",
    "r": "reset",
    "n": "hint",
    "v": "solve",
    "\r": "start",
    "\n": "start",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string.

    Digits 1-8 come back unchanged (they name a tile to move); anything
    else unmapped becomes ``""``.
    """
    action = _KEY_MAP.get(ch.lower())
    if action is not None:
        return action
    if len(ch) == 1 and ch in "12345678":
        return ch
    return ""


def get_key() -> str:
    """Block for one keypress and return its action string.

    Possible return values:
        "up", "down", "left", "right"  — slide a tile
        "1" … "8"                      — move that numbered tile
        "start"                        — Enter (start the clock)
        "shuffle", "reset", "hint", "solve", "quit"
        ""                             — unrecognised key
    """
    ch = _getch()
    if ch == "\x1b":
        if _getch() == "[":
            return _ARROW_MAP.get(_getch(), "")
        return "quit"
    return resolve(ch)


def get_key_timeout(timeout: float) -> str | None:
    """Like ``get_key`` but gives up after *timeout* seconds with ``None``.

    Reads with ``os.read`` so ``select`` still sees the remaining bytes of
    an arrow-key escape sequence.
    """
    if os.name == "nt":
        import msvcrt  # type: ignore[import-not-found]
        import time

        end = time.monotonic() + timeout
        while time.monotonic() < end:
            if msvcrt.kbhit():
                return get_key()
            time.sleep(0.02)
        return None

    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)

    def _read(wait: float) -> str | None:
        ready, _, _ = select.select([fd], [], [], wait)
        if not ready:
            return None
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    try:
        tty.setraw(fd)
        ch = _read(timeout)
        if ch is None:
            return None
        if ch != "\x1b":
            return resolve(ch)
        if _read(0.1) != "[":
            return "quit"  # bare Escape
        return _ARROW_MAP.get(_read(0.1) or "", "")
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
