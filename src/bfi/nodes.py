from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple, Union


# ---------------- Instruction nodes ----------------
@dataclass(frozen=True)
class Incr:
    pass


@dataclass(frozen=True)
class Decr:
    pass


@dataclass(frozen=True)
class ShiftLeft:
    pass


@dataclass(frozen=True)
class ShiftRight:
    pass


@dataclass(frozen=True)
class Output:
    pass


@dataclass(frozen=True)
class Input:
    pass


@dataclass(frozen=True)
class Loop:
    body: Tuple["Node", ...] = ()


Node = Union[Incr, Decr, ShiftLeft, ShiftRight, Output, Input, Loop]

_LEAF_CHARS = {
    Incr: '+',
    Decr: '-',
    ShiftLeft: '<',
    ShiftRight: '>',
    Output: '.',
    Input: ',',
}


# ---------------- Emit + counts ----------------
def emit(nodes: Sequence[Node]) -> str:
    """Render a tree back to program text holding only instruction characters."""
    out = []
    for n in nodes:
        if isinstance(n, Loop):
            out.append("[" + emit(n.body) + "]")
        else:
            out.append(_LEAF_CHARS[type(n)])
    return "".join(out)


def count_ops(nodes: Sequence[Node]) -> int:
    """Static instruction count; a loop counts its two delimiters."""
    c = 0
    for n in nodes:
        if isinstance(n, Loop):
            c += 2 + count_ops(n.body)
        else:
            c += 1
    return c
