from enum import Enum
from typing import List


class Token(Enum):
    SHIFT_RIGHT = '>'
    SHIFT_LEFT = '<'
    INCREMENT = '+'
    DECREMENT = '-'
    OUTPUT = '.'
    INPUT = ','
    LOOP_OPEN = '['
    LOOP_CLOSE = ']'
    COMMENT = ''


BF_OPS = frozenset(t.value for t in Token if t is not Token.COMMENT)


def classify(ch: str) -> Token:
    if ch in BF_OPS:
        return Token(ch)
    return Token.COMMENT


def tokenize(source: str) -> List[Token]:
    """One token per character of ``source``, in order. Never fails."""
    return [classify(ch) for ch in source]
