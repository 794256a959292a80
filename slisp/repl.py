"""Interactive shell for slisp.

Reads one line at a time, evaluates it against a single long-lived
Interpreter and prints the rendered result. A literal `quit` line or EOF ends
the session; errors are reported and the loop carries on.
"""

from __future__ import annotations

import argparse
import atexit
import logging
import readline
import sys
from pathlib import Path
from typing import Optional

from termcolor import colored

from slisp import __version__
from slisp.config import SCOPING_MODES, get_history_file, get_log_level, get_prompt
from slisp.errors import SlispError
from slisp.interpreter import Interpreter
from slisp.printer import to_display

logger = logging.getLogger(__name__)

QUIT = "quit"


def _setup_history(path: Optional[Path]) -> None:
    if path is None:
        return
    try:
        readline.read_history_file(path)
    except FileNotFoundError:
        pass
    except OSError as ex:
        logger.warning("could not read history file %s: %s", path, ex)

    def _save():
        try:
            readline.write_history_file(path)
        except OSError as ex:
            logger.warning("could not write history file %s: %s", path, ex)

    atexit.register(_save)


def _report(message) -> None:
    print(colored(f"error: {message}", "red"), file=sys.stderr)


def repl(interp: Interpreter, prompt: str | None = None) -> None:
    prompt = get_prompt() if prompt is None else prompt
    logger.info("session started")
    while True:
        try:
            line = input(prompt)
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue
        if line.strip() == QUIT:
            break
        if not line.strip():
            continue
        try:
            result = interp.eval(line)
        except SlispError as ex:
            _report(ex)
            continue
        try:
            text = to_display(result)
        except RecursionError:
            _report("result nested too deeply to display")
            continue
        print(text)
    logger.info("session ended")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="slisp", description="slisp interactive shell")
    parser.add_argument("--scoping", choices=SCOPING_MODES, help="override SLISP_SCOPING")
    parser.add_argument("--log-level", help="override SLISP_LOG_LEVEL")
    parser.add_argument("--no-history", action="store_true", help="do not read or write readline history")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    level = logging.getLevelName(args.log_level.upper()) if args.log_level else get_log_level()
    if not isinstance(level, int):
        parser.error(f"unknown log level {args.log_level!r}")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if not args.no_history:
        _setup_history(get_history_file())
    repl(Interpreter(scoping=args.scoping))
    return 0


if __name__ == "__main__":
    sys.exit(main())
