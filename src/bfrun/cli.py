from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .api import read_source
from .engine import Engine, LineSource, StreamSink, StreamSource
from .errors import BFRunError
from .state import DEFAULT_GROW_BY, DEFAULT_TAPE_SIZE
from .translator import translate

logger = logging.getLogger(__name__)


def _format_dump(cells: List[int], width: int = 8) -> str:
    return "\n".join(" ".join(f"{c:3d}" for c in cells[i:i + width]) for i in range(0, len(cells), width))


def _print_trace(line: str) -> None:
    print(line, file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bfrun",
        description="Run a program written in the eight-symbol tape language.",
    )
    parser.add_argument("code", nargs="*", help="program text (words are joined with spaces)")
    parser.add_argument("-f", "--file", help="read the program from FILE")
    parser.add_argument("--tape-size", type=int, default=DEFAULT_TAPE_SIZE, help=f"initial tape cells (default {DEFAULT_TAPE_SIZE})")
    parser.add_argument("--grow-by", type=int, default=DEFAULT_GROW_BY, help=f"cells added when the tape runs out (default {DEFAULT_GROW_BY})")
    parser.add_argument("--max-steps", type=int, default=None, help="abort after this many steps")
    parser.add_argument("--line-input", action="store_true", help="',' reads a line and keeps its first character")
    parser.add_argument("--dump", type=int, default=0, metavar="N", help="print the first N tape cells after the run")
    parser.add_argument("--trace", action="store_true", help="print one line per executed step to stderr")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)5s %(name)s: %(message)s",
    )

    if args.file is not None and args.code:
        parser.error("give the program either as code words or with -f/--file, not both")

    if args.file is not None:
        try:
            source = read_source(args.file)
        except FileNotFoundError:
            print(f"Couldn't find file: {args.file}", file=sys.stderr)
            return 1
        except OSError as e:
            print(f"Couldn't read file: {args.file} ({e.strerror or e})", file=sys.stderr)
            return 1
    elif args.code:
        source = " ".join(args.code)
    else:
        parser.print_usage()
        return 0

    read = LineSource(sys.stdin) if args.line_input else StreamSource(sys.stdin.buffer)

    try:
        program = translate(source)
        logger.debug("translated %d instructions", len(program))
        engine = Engine(
            program,
            read=read,
            write=StreamSink(sys.stdout.buffer),
            tape_size=args.tape_size,
            grow_by=args.grow_by,
            max_steps=args.max_steps,
            trace_sink=_print_trace if args.trace else None,
        )
    except ValueError as e:
        parser.error(str(e))
    except BFRunError as e:
        print(str(e), file=sys.stderr)
        return 1

    try:
        engine.run()
    except BFRunError as e:
        sys.stdout.flush()
        print(f"\n{e}", file=sys.stderr)
        return 1

    if args.dump > 0:
        print()
        print(_format_dump(engine.state.dump(args.dump)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
