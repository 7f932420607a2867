"""Interactive selection session: render, read a key, transition, repeat."""

from typing import Sequence

from loguru import logger

from .keys import decode_key, read_key
from .models import Config
from .render import render
from .screen import Screen
from .search import SearchState, transition


def select(candidates: Sequence[str], config: Config, terminal) -> str:
    """Run one session on `terminal` and return the chosen candidate.

    Raises Cancelled on the interrupt key and NoSelection when the query
    matches nothing at confirm time. Either way the terminal has already
    been restored when the exception reaches the caller.
    """
    state = SearchState.initial(candidates, config)
    logger.info(
        "session start: {} candidates, {} visible rows, query {!r}",
        len(state.candidates),
        state.visible_rows,
        state.query,
    )
    with Screen(terminal, config.visible_rows) as screen:
        while not state.done:
            screen.paint(render(state))
            event = decode_key(read_key(terminal.read_char))
            logger.trace("key {}", event)
            previous = state
            state = transition(state, event)
            if state.query != previous.query:
                logger.debug("query {!r}: {} matches", state.query, len(state.matches))
    return state.selection()
