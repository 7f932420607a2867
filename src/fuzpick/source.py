"""Reading candidate lines from an input stream."""

from typing import BinaryIO, List

TAB_WIDTH = 8


def normalize_line(line: str) -> str:
    """Strip trailing whitespace, expand tabs, drop characters that cannot be displayed."""
    line = line.rstrip().expandtabs(TAB_WIDTH)
    if line.isprintable():
        return line
    return "".join(c for c in line if c.isprintable())


def read_candidates(stream: BinaryIO) -> List[str]:
    """Load every line of `stream` as a candidate, in input order.

    Lines end at "\\n" only (a preceding "\\r" goes with the trailing
    whitespace). Bytes that are not valid UTF-8 are dropped. Empty lines
    are kept.
    """
    text = stream.read().decode("utf-8", errors="ignore")
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [normalize_line(line) for line in lines]
