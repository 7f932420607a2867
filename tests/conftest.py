"""Shared fixtures: an in-memory stand-in for the terminal device."""

from typing import List, Tuple

import pytest

from fuzpick.exceptions import TerminalError


class FakeTerminal:
    """Records every terminal operation instead of touching a device."""

    def __init__(self, keys=(), height: int = 24, width: int = 80):
        self.keys = list(keys)
        self.height = height
        self.width = width
        self.raw = False
        self.cursor_visible = True
        self.cursor: Tuple[int, int] = (0, 0)
        self.rows = {}
        self.log: List[tuple] = []
        self.fail_restore = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.log.append(("close",))

    def enter_raw_mode(self):
        self.raw = True
        self.log.append(("raw",))

    def restore_mode(self):
        self.log.append(("restore",))
        if self.fail_restore:
            raise TerminalError("restore failed")
        self.raw = False

    def read_char(self, timeout=None):
        """Pop the next queued character.

        A `None` entry in `keys` is a pause: timed reads return None there,
        as they do when the queue is empty.
        """
        if timeout is not None and (not self.keys or self.keys[0] is None):
            if self.keys:
                self.keys.pop(0)
            return None
        ch = self.keys.pop(0)
        while ch is None:
            ch = self.keys.pop(0)
        return ch

    def size(self):
        return self.height, self.width

    def write(self, data: bytes):
        self.log.append(("write", data))

    def write_at(self, row, col, data: bytes):
        self.log.append(("write_at", row, col, data))
        self.rows[row] = data
        self.cursor = (row, col + len(data))

    def move_cursor(self, row, col):
        self.log.append(("move", row, col))
        self.cursor = (row, col)

    def hide_cursor(self):
        self.log.append(("hide",))
        self.cursor_visible = False

    def show_cursor(self):
        self.log.append(("show",))
        self.cursor_visible = True

    def style(self, tag) -> bytes:
        return f"<{tag}>".encode()

    def reset_style(self) -> bytes:
        return b"</>"


@pytest.fixture
def make_terminal():
    def factory(keys=(), height=24, width=80):
        return FakeTerminal(keys, height=height, width=width)

    return factory
