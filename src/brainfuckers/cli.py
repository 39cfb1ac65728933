from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .api import read_source
from .errors import BFError
from .interpreter import Interpreter
from .options import RunOptions

logger = logging.getLogger(__name__)


def _format_dump(cells: bytes, width: int = 8) -> str:
    rows = []
    for i in range(0, len(cells), width):
        rows.append(" ".join(str(b) for b in cells[i:i + width]))
    return "\n".join(rows)


def _read_source(path: Optional[str], stdin) -> str:
    if path is None:
        # The rest of stdin stays available to ','
        return stdin.readline().decode("utf-8", errors="replace")
    return read_source(path)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="brainfuckers",
        description="Brainfuck interpreter. Without FILE, the first line of stdin is the program.",
    )
    parser.add_argument("file", nargs="?", help="Brainfuck source file")
    parser.add_argument("--newline-zero", action="store_true", help="Read input newlines as 0")
    parser.add_argument("--dump", type=int, default=0, metavar="N",
                        help="Print the first N tape cells to stderr after the run")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s", stream=sys.stderr)

    stdin = sys.stdin.buffer
    stdout = sys.stdout.buffer

    try:
        source = _read_source(args.file, stdin)
    except OSError as e:
        print(f"Couldn't read `{args.file or '<stdin>'}`: {e}", file=sys.stderr)
        return 1
    logger.debug("loaded %d characters from %s", len(source), args.file or "stdin")

    options = RunOptions(newline_as_zero=args.newline_zero)
    try:
        interpreter = Interpreter(
            source,
            stdin=stdin,
            stdout=stdout,
            options=options,
        )
        interpreter.run()
    except BFError as e:
        print(e, file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130

    if args.dump > 0:
        print(_format_dump(interpreter.state.tape.snapshot(0, args.dump)), file=sys.stderr)
    return 0
