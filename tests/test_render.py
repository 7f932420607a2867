"""
Tests for fuzpick.render: frames built from search states.
"""
from fuzpick.models import (
    Config,
    INVERSE,
    ResetStyle,
    SetStyle,
    Text,
    line_text,
)
from fuzpick.render import render
from fuzpick.search import SearchState


def make_state(candidates, visible_rows=5, query=""):
    return SearchState.initial(candidates, Config(visible_rows=visible_rows, initial_query=query))


class TestRender:
    def test_query_line_and_cursor(self):
        frame = render(make_state(["foo", "bar"], query="fo"))
        assert line_text(frame.lines[0]) == "> fo"
        assert frame.cursor_column == 4

    def test_fixed_height_with_padding(self):
        frame = render(make_state(["foo", "bar"], visible_rows=5))
        results = frame.lines[1:]
        assert len(frame.lines) == 6
        assert len(results) == 5
        assert [line_text(l) for l in results] == ["foo", "bar", "", "", ""]
        assert sum(1 for l in results if line_text(l) == "") == 3

    def test_no_matches_still_full_height(self):
        frame = render(make_state(["foo"], visible_rows=3, query="zzz"))
        assert [line_text(l) for l in frame.lines] == ["> zzz", "", "", ""]

    def test_truncates_to_visible_rows(self):
        frame = render(make_state([f"c{i}" for i in range(10)], visible_rows=3))
        assert [line_text(l) for l in frame.lines[1:]] == ["c0", "c1", "c2"]

    def test_selected_line_is_inverse(self):
        state = make_state(["foo", "bar"]).down()
        frame = render(state)
        assert frame.lines[1] == (Text("foo"),)
        assert frame.lines[2] == (SetStyle(INVERSE), Text("bar"), ResetStyle())

    def test_cursor_ignores_selection(self):
        state = make_state(["foo", "bar"], query="")
        moved = state.down()
        assert render(state).cursor_column == render(moved).cursor_column == 2

    def test_cursor_column_counts_cells(self):
        frame = render(make_state(["漢字"], query="漢字"))
        assert frame.cursor_column == 2 + 4
