"""Keypress decoding: raw text read from the terminal to key events."""

from dataclasses import dataclass
from typing import Callable, Dict, Optional

KEY_DOWN = "down"
KEY_UP = "up"
KEY_DELETE_WORD = "delete_word"
KEY_BACKSPACE = "backspace"
KEY_CONFIRM = "confirm"
KEY_CANCEL = "cancel"
KEY_CHAR = "char"  # printable character appended to the query

ESCAPE = "\x1b"
ESCAPE_TIMEOUT = 0.05  # seconds to wait for the rest of an escape sequence
MAX_SEQUENCE_LENGTH = 16


@dataclass(frozen=True)
class KeyEvent:
    kind: str
    char: str = ""


CONTROL_KEYS: Dict[str, str] = {
    "\x0e": KEY_DOWN,  # ^N
    "\x10": KEY_UP,  # ^P
    "\x17": KEY_DELETE_WORD,  # ^W
    "\x08": KEY_BACKSPACE,  # ^H
    "\x7f": KEY_BACKSPACE,  # DEL
    "\r": KEY_CONFIRM,
    "\n": KEY_CONFIRM,
    "\x03": KEY_CANCEL,  # ^C
    "\x1b[A": KEY_UP,
    "\x1bOA": KEY_UP,
    "\x1b[B": KEY_DOWN,
    "\x1bOB": KEY_DOWN,
}

ReadChar = Callable[[Optional[float]], Optional[str]]


def read_key(read_char: ReadChar) -> str:
    """Read one keypress using `read_char(timeout)`.

    `read_char(None)` blocks; with a timeout it returns None when nothing
    arrives in time. Escape sequences (CSI `ESC [ ... final` and SS3
    `ESC O x`) are returned whole so their printable tail never reaches
    the query. A lone ESC comes back as itself.
    """
    ch = read_char(None)
    if ch != ESCAPE:
        return ch
    intro = read_char(ESCAPE_TIMEOUT)
    if intro is None:
        return ch
    seq = ch + intro
    if intro == "O":
        return seq + (read_char(ESCAPE_TIMEOUT) or "")
    if intro != "[":
        # ESC followed by an ordinary key (Alt+key)
        return seq
    while len(seq) < MAX_SEQUENCE_LENGTH:
        nxt = read_char(ESCAPE_TIMEOUT)
        if nxt is None:
            break
        seq += nxt
        if "@" <= nxt <= "~":
            break
    return seq


def decode_key(text: str) -> Optional[KeyEvent]:
    """Map one keypress to a KeyEvent, or None for keys that do nothing."""
    kind = CONTROL_KEYS.get(text)
    if kind is not None:
        return KeyEvent(kind)
    if len(text) == 1 and text.isprintable():
        return KeyEvent(KEY_CHAR, text)
    return None
