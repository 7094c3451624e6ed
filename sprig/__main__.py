from __future__ import annotations

import argparse
import logging
import sys

from sprig.config import get_history_file, get_log_level, get_recursion_limit
from sprig.errors import SchemeError
from sprig.interpreter import Interpreter
from sprig.reader.ports import ConsolePort
from sprig.repl import repl

WELCOME_BANNER = "Welcome to sprig, a simple Scheme interpreter."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sprig", description=WELCOME_BANNER)
    parser.add_argument("input", nargs="?", metavar="INPUT",
                        help="Scheme source file to run")
    parser.add_argument("-r", "--repl", action="store_true",
                        help="start the REPL after running INPUT")
    parser.add_argument("--no-prelude", action="store_true",
                        help="start with the primitive table only")
    parser.add_argument("--log-level", default=get_log_level(),
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        type=str.upper)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    try:
        limit = get_recursion_limit()
    except ValueError as exc:
        print(f"config: {exc}", file=sys.stderr)
        return 1
    sys.setrecursionlimit(max(sys.getrecursionlimit(), limit))

    try:
        interp = Interpreter(prelude=None if args.no_prelude else 'auto')
        if args.input:
            interp.load(args.input)
    except SchemeError as exc:
        print(f"run: {exc}", file=sys.stderr)
        return 1
    if args.input and not args.repl:
        return 0

    print(WELCOME_BANNER)
    port = ConsolePort(history_file=get_history_file())
    try:
        repl(port, interp)
    except KeyboardInterrupt:
        print()
    finally:
        port.save_history()
    return 0


if __name__ == "__main__":
    sys.exit(main())
