"""Immutable search state and its keystroke transitions."""

import re
from dataclasses import dataclass, field, replace
from typing import Optional, Sequence, Tuple

from .exceptions import Cancelled, NoSelection
from .keys import (
    KeyEvent,
    KEY_BACKSPACE,
    KEY_CANCEL,
    KEY_CHAR,
    KEY_CONFIRM,
    KEY_DELETE_WORD,
    KEY_DOWN,
    KEY_UP,
)
from .models import Config, MatchResult
from .scorer import rank

TRAILING_WORD_RE = re.compile(r"[^ ]* *$")


@dataclass(frozen=True)
class SearchState:
    """Candidates, query and selection at one point of a session.

    Never mutated; every transition returns a new instance. `matches` is
    derived from (candidates, query) and rebuilt whenever the query changes.
    """

    candidates: Tuple[str, ...]
    visible_rows: int
    query: str = ""
    index: int = 0
    done: bool = False
    matches: Tuple[MatchResult, ...] = field(default=(), compare=False)

    @classmethod
    def initial(cls, candidates: Sequence[str], config: Config) -> "SearchState":
        return cls(
            candidates=tuple(candidates),
            visible_rows=config.visible_rows,
        ).with_query(config.initial_query)

    def with_query(self, query: str, index: int = 0) -> "SearchState":
        """Return a state for a new query with freshly ranked matches."""
        matches = tuple(rank(self.candidates, query))
        state = replace(self, query=query, matches=matches, index=index)
        return replace(state, index=min(index, state.max_index))

    @property
    def max_index(self) -> int:
        """Largest selectable index: the last visible match."""
        return max(min(self.visible_rows, len(self.matches)) - 1, 0)

    def down(self) -> "SearchState":
        return replace(self, index=min(self.index + 1, self.max_index))

    def up(self) -> "SearchState":
        return replace(self, index=max(self.index - 1, 0))

    def append(self, ch: str) -> "SearchState":
        return self.with_query(self.query + ch)

    def backspace(self) -> "SearchState":
        return self.with_query(self.query[:-1])

    def delete_word(self) -> "SearchState":
        # Unlike the other edits, keeps the current selection.
        query = TRAILING_WORD_RE.sub("", self.query, count=1)
        return self.with_query(query, index=self.index)

    def confirm(self) -> "SearchState":
        return replace(self, done=True)

    def selection(self) -> str:
        """Return the selected candidate's text.

        Raises NoSelection if nothing matches the current query.
        """
        if not self.matches:
            raise NoSelection(f"no candidate matches {self.query!r}")
        return self.matches[self.index].text


def transition(state: SearchState, event: Optional[KeyEvent]) -> SearchState:
    """Apply one key event to state.

    Finished states and unknown events are returned unchanged. The cancel
    key raises Cancelled.
    """
    if state.done or event is None:
        return state
    if event.kind == KEY_CANCEL:
        raise Cancelled("selection cancelled")
    if event.kind == KEY_DOWN:
        return state.down()
    if event.kind == KEY_UP:
        return state.up()
    if event.kind == KEY_CHAR:
        return state.append(event.char)
    if event.kind == KEY_BACKSPACE:
        return state.backspace()
    if event.kind == KEY_DELETE_WORD:
        return state.delete_word()
    if event.kind == KEY_CONFIRM:
        return state.confirm()
    return state
