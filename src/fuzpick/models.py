"""Data models and constants for fuzpick."""

from dataclasses import dataclass
from typing import Literal, Tuple, Union

from wcwidth import wcwidth

from .exceptions import ConfigError

DEFAULT_VISIBLE_ROWS = 20
PROMPT = "> "

StyleTag = Literal["inverse"]
INVERSE: StyleTag = "inverse"


@dataclass(frozen=True)
class Config:
    """Settings fixed for the length of one selection session."""

    visible_rows: int = DEFAULT_VISIBLE_ROWS
    initial_query: str = ""

    def __post_init__(self) -> None:
        if self.visible_rows < 1:
            raise ConfigError(f"visible rows must be at least 1, got {self.visible_rows}")


@dataclass(frozen=True)
class MatchResult:
    """A candidate together with its score against the current query."""

    text: str
    score: float


@dataclass(frozen=True)
class Text:
    text: str


@dataclass(frozen=True)
class SetStyle:
    tag: StyleTag


@dataclass(frozen=True)
class ResetStyle:
    pass


Segment = Union[Text, SetStyle, ResetStyle]
StyledLine = Tuple[Segment, ...]


@dataclass(frozen=True)
class RenderedFrame:
    """One screenful: the query line followed by the result lines."""

    lines: Tuple[StyledLine, ...]
    cursor_column: int


def line_text(line: StyledLine) -> str:
    """Return the visible text of a styled line, without style markers."""
    return "".join(seg.text for seg in line if isinstance(seg, Text))


def char_width(ch: str) -> int:
    """Terminal cells taken by one character (0 for combining marks)."""
    return max(wcwidth(ch), 0)


def text_width(text: str) -> int:
    return sum(char_width(ch) for ch in text)
