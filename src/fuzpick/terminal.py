"""Terminal device control: raw mode, keypresses, sizing and cursor addressing.

Escape sequences come from the terminfo database through curses, so nothing
here hardcodes a particular terminal's dialect.
"""

import curses
import os
import select
import termios
import tty
from typing import List, Optional, Tuple

from loguru import logger

from .exceptions import TerminalError
from .models import INVERSE, StyleTag

STYLE_CAPABILITIES = {INVERSE: "rev"}


def utf8_length(lead: int) -> int:
    """Number of bytes in a UTF-8 sequence starting with byte `lead`."""
    if lead < 0x80:
        return 1
    if 0xC0 <= lead < 0xE0:
        return 2
    if 0xE0 <= lead < 0xF0:
        return 3
    if 0xF0 <= lead < 0xF8:
        return 4
    return 1


class Terminal:
    """Exclusive handle on the controlling terminal."""

    DEFAULT_DEVICE = "/dev/tty"

    def __init__(self, device: str = DEFAULT_DEVICE):
        try:
            self.file = open(device, "r+b", buffering=0)
        except OSError as e:
            raise TerminalError(f"cannot open {device}: {e}") from e
        self.fd = self.file.fileno()
        self._saved_mode: Optional[List] = None
        try:
            curses.setupterm(fd=self.fd)
        except curses.error as e:
            self.file.close()
            raise TerminalError(f"cannot set up terminal: {e}") from e

        self._cup = curses.tigetstr("cup")
        if not self._cup:
            self.file.close()
            raise TerminalError("terminal does not support cursor addressing")
        self._civis = curses.tigetstr("civis") or b""
        self._cnorm = curses.tigetstr("cnorm") or b""
        self._sgr0 = curses.tigetstr("sgr0") or b""
        self._styles = {
            tag: curses.tigetstr(cap) or b"" for tag, cap in STYLE_CAPABILITIES.items()
        }

    def __enter__(self) -> "Terminal":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if not self.file.closed:
            self.file.close()

    def fileno(self) -> int:
        return self.fd

    # -- modes ---------------------------------------------------------------

    def enter_raw_mode(self) -> None:
        """Save the current mode and switch the device to raw input."""
        try:
            self._saved_mode = termios.tcgetattr(self.fd)
            tty.setraw(self.fd)
        except termios.error as e:
            raise TerminalError(f"cannot enter raw mode: {e}") from e

    def restore_mode(self) -> None:
        """Reapply the mode saved by enter_raw_mode."""
        if self._saved_mode is None:
            return
        try:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self._saved_mode)
        except termios.error as e:
            raise TerminalError(f"cannot restore terminal mode: {e}") from e
        self._saved_mode = None
        logger.debug("terminal mode restored")

    # -- input ---------------------------------------------------------------

    def _read_exact(self, n: int) -> bytes:
        data = b""
        while len(data) < n:
            chunk = os.read(self.fd, n - len(data))
            if not chunk:
                raise TerminalError("terminal closed while reading a key")
            data += chunk
        return data

    def read_char(self, timeout: Optional[float] = None) -> Optional[str]:
        """Read one character from the device.

        Blocks when `timeout` is None; otherwise returns None if nothing
        arrives within `timeout` seconds. Multi-byte UTF-8 characters are
        read whole; undecodable bytes are dropped, which can yield an empty
        string.
        """
        if timeout is not None:
            ready, _, _ = select.select([self.fd], [], [], timeout)
            if not ready:
                return None
        data = self._read_exact(1)
        extra = utf8_length(data[0]) - 1
        if extra:
            data += self._read_exact(extra)
        return data.decode("utf-8", errors="ignore")

    def size(self) -> Tuple[int, int]:
        """Return (height, width) in character cells."""
        try:
            columns, lines = os.get_terminal_size(self.fd)
        except OSError as e:
            raise TerminalError(f"cannot read terminal size: {e}") from e
        return lines, columns

    # -- output --------------------------------------------------------------

    def write(self, data: bytes) -> None:
        view = memoryview(data)
        while view:
            written = os.write(self.fd, view)
            view = view[written:]

    def cursor_to(self, row: int, col: int) -> bytes:
        return curses.tparm(self._cup, row, col)

    def move_cursor(self, row: int, col: int) -> None:
        self.write(self.cursor_to(row, col))

    def write_at(self, row: int, col: int, data: bytes) -> None:
        self.write(self.cursor_to(row, col) + data)

    def hide_cursor(self) -> None:
        self.write(self._civis)

    def show_cursor(self) -> None:
        self.write(self._cnorm)

    def style(self, tag: StyleTag) -> bytes:
        return self._styles.get(tag, b"")

    def reset_style(self) -> bytes:
        return self._sgr0
