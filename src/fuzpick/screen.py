"""Display: paints rendered frames at the bottom of the terminal in place."""

from typing import List, Tuple

from loguru import logger

from .models import RenderedFrame, ResetStyle, SetStyle, StyledLine, Text, char_width


def clip_to_cells(text: str, cells: int) -> Tuple[str, int]:
    """Longest prefix of text fitting in `cells` columns, and its width."""
    used = 0
    for i, ch in enumerate(text):
        w = char_width(ch)
        if used + w > cells:
            return text[:i], used
        used += w
    return text, used


class Screen:
    """Owns the terminal for one session.

    Used as a context manager: entering reserves `visible_rows` lines below
    the prompt and switches to raw mode; leaving parks the cursor on the last
    row and restores the previous mode on every exit path.
    """

    def __init__(self, terminal, visible_rows: int):
        self.terminal = terminal
        self.visible_rows = visible_rows

    def __enter__(self) -> "Screen":
        self.reserve()
        self.terminal.enter_raw_mode()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            height, _ = self.terminal.size()
            self.terminal.move_cursor(height - 1, 0)
            self.terminal.show_cursor()
        finally:
            self.terminal.restore_mode()
        if exc_type is not None:
            logger.debug("session ended by {}", exc_type.__name__)

    def reserve(self) -> None:
        """Scroll blank lines into view so redraws never cover older output."""
        self.terminal.write(b"\n" * self.visible_rows)
        height, width = self.terminal.size()
        logger.debug("reserved {} rows on a {}x{} terminal", self.visible_rows, height, width)

    def start_line(self, height: int) -> int:
        return height - self.visible_rows - 1

    def encode_line(self, line: StyledLine, width: int) -> bytes:
        """Turn a styled line into bytes exactly `width - 1` cells wide.

        Text past the edge is cut off and the rest of the row is blanked
        so that leftovers from an earlier, longer line disappear.
        """
        limit = max(width - 1, 0)
        out: List[bytes] = []
        used = 0
        styled = False
        for seg in line:
            if isinstance(seg, Text):
                visible, cells = clip_to_cells(seg.text, limit - used)
                out.append(visible.encode("utf-8"))
                used += cells
            elif isinstance(seg, SetStyle):
                out.append(self.terminal.style(seg.tag))
                styled = True
            elif isinstance(seg, ResetStyle):
                out.append(self.terminal.reset_style())
                styled = False
        if styled:
            out.append(self.terminal.reset_style())
        out.append(b" " * (limit - used))
        return b"".join(out)

    def paint(self, frame: RenderedFrame) -> None:
        height, width = self.terminal.size()
        start = self.start_line(height)
        self.terminal.hide_cursor()
        for i, line in enumerate(frame.lines):
            row = start + i
            if row < 0 or row >= height:
                continue
            self.terminal.write_at(row, 0, self.encode_line(line, width))
        self.terminal.move_cursor(max(start, 0), min(frame.cursor_column, max(width - 1, 0)))
        self.terminal.show_cursor()
