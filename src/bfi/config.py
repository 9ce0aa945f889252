from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_TAPE_SIZE = 30000


class EOFPolicy(Enum):
    """What ``,`` does once the input stream is exhausted."""

    UNCHANGED = 'unchanged'
    ZERO = 'zero'
    MAX = 'max'
    ERROR = 'error'

    @classmethod
    def parse(cls, name: str) -> "EOFPolicy":
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ', '.join(p.value for p in cls)
            raise ValueError(f"Unknown EOF policy: {name!r} (expected one of: {choices})") from None


@dataclass(frozen=True)
class RunOptions:
    tape_size: int = DEFAULT_TAPE_SIZE
    eof_policy: EOFPolicy = EOFPolicy.UNCHANGED

    def __post_init__(self) -> None:
        if self.tape_size < 1:
            raise ValueError(f"tape_size must be at least 1, got {self.tape_size}")
