from __future__ import annotations

import logging
from typing import BinaryIO, Optional, Sequence

from .config import EOFPolicy, RunOptions
from .errors import make_evaluation_depth_error, make_input_exhausted_error, make_out_of_bounds_error
from .nodes import Decr, Incr, Input, Loop, Node, Output, ShiftLeft, ShiftRight
from .state import ExecutionState

logger = logging.getLogger(__name__)


def _shift(state: ExecutionState, delta: int) -> None:
    target = state.pointer + delta
    if target < 0 or target >= state.tape_size:
        raise make_out_of_bounds_error(pointer=state.pointer, target=target, tape_size=state.tape_size)
    state.pointer = target


def _read(state: ExecutionState) -> None:
    data = state.input.read(1)
    if data:
        state.store(data[0])
        return

    policy = state.eof_policy
    if policy is EOFPolicy.UNCHANGED:
        return
    if policy is EOFPolicy.ZERO:
        state.store(0)
    elif policy is EOFPolicy.MAX:
        state.store(255)
    else:
        raise make_input_exhausted_error(pointer=state.pointer)


def execute(nodes: Sequence[Node], state: ExecutionState) -> None:
    """Execute ``nodes`` in order against ``state``, recursing into loops."""
    for n in nodes:
        if isinstance(n, Incr):
            state.store(state.current + 1)
        elif isinstance(n, Decr):
            state.store(state.current - 1)
        elif isinstance(n, ShiftRight):
            _shift(state, 1)
        elif isinstance(n, ShiftLeft):
            _shift(state, -1)
        elif isinstance(n, Output):
            state.output.write(bytes((state.current,)))
        elif isinstance(n, Input):
            _read(state)
        elif isinstance(n, Loop):
            while state.current != 0:
                execute(n.body, state)
        else:
            raise TypeError(f"Unknown instruction node: {n!r}")


def run(
    tree: Sequence[Node],
    input_stream: BinaryIO,
    output_stream: BinaryIO,
    options: Optional[RunOptions] = None,
) -> ExecutionState:
    """Run ``tree`` on a fresh zeroed tape and return the final state."""
    opts = RunOptions() if options is None else options
    state = ExecutionState.allocate(input_stream, output_stream, opts)
    logger.debug("running %d top-level nodes (tape_size=%d, eof=%s)",
                 len(tree), opts.tape_size, opts.eof_policy.value)
    try:
        execute(tree, state)
    except RecursionError:
        raise make_evaluation_depth_error(pointer=state.pointer) from None
    logger.debug("run finished with pointer at %d", state.pointer)
    return state
