"""
Tests for fuzpick.cli: argument handling and exit statuses.
"""
import io
import types

import pytest
from loguru import logger

from fuzpick import cli
from fuzpick.exceptions import TerminalError


@pytest.fixture
def run(monkeypatch, make_terminal):
    """Run main() with `lines` on stdin and `keys` typed at the terminal."""

    def runner(lines, keys, argv=()):
        term = make_terminal(keys)
        stdin = types.SimpleNamespace(buffer=io.BytesIO("".join(l + "\n" for l in lines).encode()))
        monkeypatch.setattr(cli.sys, "stdin", stdin)
        monkeypatch.setattr(cli, "Terminal", lambda: term)
        cli.main(list(argv))
        return term

    return runner


class TestMain:
    def test_prints_selection(self, run, capsys):
        run(["foo", "bar"], list("ba\r"))
        assert capsys.readouterr().out == "bar\n"

    def test_search_option(self, run, capsys):
        run(["foo", "bar"], ["\r"], argv=["-s", "fo"])
        assert capsys.readouterr().out == "foo\n"

    def test_visible_rows_option(self, run, capsys):
        term = run(["a", "b", "c"], ["\x0e", "\x0e", "\r"], argv=["-n", "2"])
        assert capsys.readouterr().out == "b\n"
        assert term.log[0] == ("write", b"\n\n")

    def test_cancel_exit_status(self, run, capsys):
        with pytest.raises(SystemExit) as exc:
            run(["foo"], ["\x03"])
        assert exc.value.code == cli.EXIT_CANCELLED
        assert capsys.readouterr().out == ""

    def test_no_selection_exit_status(self, run, capsys):
        with pytest.raises(SystemExit) as exc:
            run(["foo"], list("zzz\r"))
        assert exc.value.code == cli.EXIT_NO_SELECTION
        assert capsys.readouterr().out == ""

    def test_invalid_visible_rows(self, run):
        with pytest.raises(SystemExit) as exc:
            run(["foo"], ["\r"], argv=["-n", "0"])
        assert "visible rows" in str(exc.value.code)

    def test_terminal_failure(self, monkeypatch, capsys):
        def broken():
            raise TerminalError("cannot open /dev/tty")

        monkeypatch.setattr(cli.sys, "stdin", types.SimpleNamespace(buffer=io.BytesIO(b"foo\n")))
        monkeypatch.setattr(cli, "Terminal", broken)
        with pytest.raises(SystemExit) as exc:
            cli.main([])
        assert "/dev/tty" in str(exc.value.code)
        assert capsys.readouterr().out == ""

    def test_log_file(self, run, tmp_path):
        log_file = tmp_path / "fuzpick.log"
        run(["foo", "bar"], list("b\r"), argv=["--log-file", str(log_file)])
        logger.remove()
        text = log_file.read_text()
        assert "session start" in text
        assert "selected 'bar'" in text


class TestParser:
    def test_defaults(self):
        args = cli.build_parser().parse_args([])
        assert args.search == ""
        assert args.visible_rows == 20
        assert args.log_file is None
