from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple


def _locate(source: str, offset: int) -> Tuple[int, int]:
    """Return the 1-based (line, column) of ``offset`` in ``source``."""
    line = source.count('\n', 0, offset) + 1
    column = offset - (source.rfind('\n', 0, offset) + 1) + 1
    return line, column


def _build_context(lines: List[str], line_no_1: int, column: int, *, context: int = 2) -> str:
    idx = max(1, line_no_1)
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
        if i == idx:
            out.append(f"  {'':4s} | {' ' * (column - 1)}^")
    return "\n".join(out)


def _hint_for(kind: str) -> Optional[str]:
    if kind == 'unmatched_close':
        return "Remove the extra ']' or add the '[' it should close."
    if kind == 'unterminated':
        return "Add the missing ']' that closes this loop."
    if kind == 'out_of_bounds':
        return 'Check the balance of < and > in the program, or run with a larger --tape-size.'
    if kind == 'input_exhausted':
        return 'Provide more input, or pick another --eof policy.'
    if kind == 'too_deep':
        return 'Loops nested this deeply exceed the interpreter recursion limit; flatten the program.'
    return None


@dataclass
class BFIError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class BFIParseError(BFIError):
    offset: int
    line: int
    column: int
    context: str


@dataclass
class UnmatchedLoopClose(BFIParseError):
    pass


@dataclass
class UnterminatedLoop(BFIParseError):
    pass


@dataclass
class LoopNestingTooDeep(BFIParseError):
    pass


@dataclass
class BFIRuntimeError(BFIError):
    pointer: int


@dataclass
class PointerOutOfBounds(BFIRuntimeError):
    tape_size: int


@dataclass
class InputExhausted(BFIRuntimeError):
    pass


@dataclass
class EvaluationTooDeep(BFIRuntimeError):
    pass


def _parse_error(cls, *, kind: str, message: str, source: str, offset: int) -> BFIParseError:
    line, column = _locate(source, offset)
    ctx = _build_context(source.split('\n'), line, column)
    hint = _hint_for(kind)
    hint_block = f"\nHint: {hint}" if hint else ""
    return cls(
        message=f"ParseError: {message} (line {line}, column {column})\n{ctx}{hint_block}",
        offset=offset,
        line=line,
        column=column,
        context=ctx,
    )


def make_unmatched_close_error(*, source: str, offset: int) -> UnmatchedLoopClose:
    return _parse_error(
        UnmatchedLoopClose,
        kind='unmatched_close',
        message="unmatched ']'",
        source=source,
        offset=offset,
    )


def make_unterminated_loop_error(*, source: str, offset: int) -> UnterminatedLoop:
    return _parse_error(
        UnterminatedLoop,
        kind='unterminated',
        message="unterminated loop, '[' is never closed",
        source=source,
        offset=offset,
    )


def make_out_of_bounds_error(*, pointer: int, target: int, tape_size: int) -> PointerOutOfBounds:
    side = 'left of cell 0' if target < 0 else f'right of cell {tape_size - 1}'
    return PointerOutOfBounds(
        message=f"RuntimeError: pointer moved {side} (pointer {pointer}, tape size {tape_size})"
                f"\nHint: {_hint_for('out_of_bounds')}",
        pointer=pointer,
        tape_size=tape_size,
    )


def make_input_exhausted_error(*, pointer: int) -> InputExhausted:
    return InputExhausted(
        message=f"RuntimeError: input exhausted while reading into cell {pointer}"
                f"\nHint: {_hint_for('input_exhausted')}",
        pointer=pointer,
    )


def make_nesting_error(*, source: str, offset: int) -> LoopNestingTooDeep:
    return _parse_error(
        LoopNestingTooDeep,
        kind='too_deep',
        message="loop nesting too deep",
        source=source,
        offset=offset,
    )


def make_evaluation_depth_error(*, pointer: int) -> EvaluationTooDeep:
    return EvaluationTooDeep(
        message=f"RuntimeError: loop nesting too deep to evaluate (pointer {pointer})"
                f"\nHint: {_hint_for('too_deep')}",
        pointer=pointer,
    )
