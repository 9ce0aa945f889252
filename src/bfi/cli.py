from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import List, Optional

from .config import DEFAULT_TAPE_SIZE, EOFPolicy, RunOptions
from .errors import BFIError
from .evaluator import run
from .nodes import count_ops, emit
from .parser import parse


def format_cells(memory, count: int, *, per_row: int = 8) -> str:
    cells = [int(b) for b in memory[:count]]
    return "\n".join(" ".join(map(str, cells[i:i + per_row])) for i in range(0, len(cells), per_row))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bfi",
        description="Tree-walking Brainfuck interpreter.",
    )
    parser.add_argument("source", help="Path to the Brainfuck program")
    parser.add_argument("--tape-size", type=int, default=DEFAULT_TAPE_SIZE,
                        help=f"Number of cells on the tape (default {DEFAULT_TAPE_SIZE})")
    parser.add_argument("--eof", choices=[p.value for p in EOFPolicy], default=EOFPolicy.UNCHANGED.value,
                        help="What ',' does at end of input (default: unchanged)")
    parser.add_argument("--emit", action="store_true", help="Print the canonical program instead of running it")
    parser.add_argument("--dump", type=int, default=0, metavar="N",
                        help="Print the first N tape cells to stderr after the run")
    parser.add_argument("--stats", action="store_true", help="Print parse and execution times to stderr")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        # Undecodable bytes can only be comments.
        with open(args.source, 'r', encoding='utf-8', errors='replace') as f:
            code = f.read()
    except FileNotFoundError:
        print(f"Couldn't find file: {args.source}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Couldn't read file: {args.source} ({e.strerror or e})", file=sys.stderr)
        return 1

    try:
        options = RunOptions(tape_size=args.tape_size, eof_policy=EOFPolicy.parse(args.eof))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        start = time.time()
        tree = parse(code)
        end = time.time()
    except BFIError as e:
        print(e, file=sys.stderr)
        return 1

    if args.stats:
        print(f"Parsing took {(end - start) * 1000:.2f} ms ({count_ops(tree)} ops)", file=sys.stderr)

    if args.emit:
        sys.stdout.write(emit(tree) + "\n")
        return 0

    out = sys.stdout.buffer
    state = None
    status = 0
    start = time.time()
    try:
        state = run(tree, sys.stdin.buffer, out, options)
    except BFIError as e:
        print(e, file=sys.stderr)
        status = 1
    finally:
        out.flush()
    end = time.time()

    if args.stats:
        print(f"Execution took {(end - start) * 1000:.2f} ms", file=sys.stderr)
    if args.dump > 0 and state is not None:
        print(format_cells(state.memory, args.dump), file=sys.stderr)
    return status
