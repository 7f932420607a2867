"""Search state to screen frame (pure, no terminal escapes)."""

from typing import List

from .models import (
    INVERSE,
    PROMPT,
    RenderedFrame,
    ResetStyle,
    SetStyle,
    StyledLine,
    Text,
    text_width,
)
from .search import SearchState


def render(state: SearchState) -> RenderedFrame:
    """Build the query line plus exactly `visible_rows` result lines.

    Missing results are blank lines so the drawn block never shrinks.
    """
    query_line = PROMPT + state.query
    lines: List[StyledLine] = [(Text(query_line),)]

    for i, match in enumerate(state.matches[: state.visible_rows]):
        if i == state.index:
            lines.append((SetStyle(INVERSE), Text(match.text), ResetStyle()))
        else:
            lines.append((Text(match.text),))

    lines.extend(() for _ in range(state.visible_rows + 1 - len(lines)))
    return RenderedFrame(lines=tuple(lines), cursor_column=text_width(query_line))
