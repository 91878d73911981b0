"""Command-line entry point: runs a crisp file, or starts the REPL when no file is given."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from crisp.config import SCOPINGS
from crisp.display import to_display
from crisp.interpreter import Interpreter
from crisp.repl import Shell
from crisp.types.errors import CrispError

log = logging.getLogger("crisp")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="crisp", description="A minimal Lisp interpreter.")
    parser.add_argument("file", help="file to evaluate (if omitted, starts the REPL)", nargs="?")
    parser.add_argument("--max-depth", type=int, default=None, help="maximum evaluation depth")
    parser.add_argument("--scoping", choices=SCOPINGS, default=None,
                        help="parent of a call scope: the lambda's definition site or the caller")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    return parser


def run_file(path: Path, interpreter: Interpreter) -> int:
    contents = path.read_text(encoding="utf-8")
    log.info("running %s", path)
    try:
        result = interpreter.eval(contents)
    except CrispError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    print(to_display(result))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    interpreter = Interpreter(max_depth=args.max_depth, scoping=args.scoping)
    if args.file is not None:
        return run_file(Path(args.file), interpreter)

    Shell(interpreter).cmdloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
