"""fuzpick - interactive fuzzy selector for the terminal."""

__version__ = "1.0.0"

from loguru import logger

from .exceptions import (
    FuzpickError,
    ConfigError,
    NoSelection,
    Cancelled,
    TerminalError,
)
from .models import Config, MatchResult, RenderedFrame, DEFAULT_VISIBLE_ROWS
from .scorer import score, rank
from .search import SearchState, transition
from .render import render
from .ui import select

logger.disable("fuzpick")

__all__ = [
    "Config",
    "MatchResult",
    "RenderedFrame",
    "DEFAULT_VISIBLE_ROWS",
    "FuzpickError",
    "ConfigError",
    "NoSelection",
    "Cancelled",
    "TerminalError",
    "score",
    "rank",
    "SearchState",
    "transition",
    "render",
    "select",
]
