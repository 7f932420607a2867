"""fuzpick command-line interface."""

import argparse
import sys
from typing import List, Optional

from loguru import logger

from . import __version__
from .exceptions import Cancelled, ConfigError, NoSelection, TerminalError
from .models import Config, DEFAULT_VISIBLE_ROWS
from .source import read_candidates
from .terminal import Terminal
from .ui import select

EXIT_NO_SELECTION = 1
EXIT_CANCELLED = 130

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function} - {message}"


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    p = argparse.ArgumentParser(
        prog="fuzpick",
        description="Read lines from stdin, pick one interactively, print it.",
    )
    p.add_argument("-s", "--search", default="", help="Initial query")
    p.add_argument(
        "-n",
        "--visible-rows",
        type=int,
        default=DEFAULT_VISIBLE_ROWS,
        help=f"Number of result lines shown (default: {DEFAULT_VISIBLE_ROWS})",
    )
    p.add_argument("--log-file", help="Write a debug log to this file")
    p.add_argument("--log-level", default="DEBUG", help="Log level for --log-file")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def configure_logging(path: Optional[str], level: str) -> None:
    """Send fuzpick's log to `path`; without a path the package stays silent.

    Never logs to stderr: the terminal belongs to the session.
    """
    logger.remove()
    if not path:
        return
    logger.add(path, level=level.upper(), format=LOG_FORMAT)
    logger.enable("fuzpick")


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, args.log_level)

    try:
        config = Config(visible_rows=args.visible_rows, initial_query=args.search)
    except ConfigError as e:
        sys.exit(f"fuzpick: {e}")

    candidates = read_candidates(sys.stdin.buffer)

    try:
        with Terminal() as terminal:
            choice = select(candidates, config, terminal)
    except Cancelled:
        logger.info("cancelled")
        sys.exit(EXIT_CANCELLED)
    except NoSelection as e:
        logger.info("{}", e)
        sys.exit(EXIT_NO_SELECTION)
    except TerminalError as e:
        logger.error("terminal failure: {}", e)
        sys.exit(f"fuzpick: {e}")

    logger.info("selected {!r}", choice)
    print(choice)


if __name__ == "__main__":
    main()
