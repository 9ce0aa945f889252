from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO

import numpy as np

from .config import EOFPolicy, RunOptions


@dataclass
class ExecutionState:
    input: BinaryIO
    output: BinaryIO
    memory: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=np.uint8))
    pointer: int = 0
    eof_policy: EOFPolicy = EOFPolicy.UNCHANGED

    @classmethod
    def allocate(cls, input: BinaryIO, output: BinaryIO, options: RunOptions) -> "ExecutionState":
        return cls(
            input=input,
            output=output,
            memory=np.zeros(options.tape_size, dtype=np.uint8),
            eof_policy=options.eof_policy,
        )

    @property
    def tape_size(self) -> int:
        return len(self.memory)

    @property
    def current(self) -> int:
        return int(self.memory[self.pointer])

    def store(self, value: int) -> None:
        self.memory[self.pointer] = np.uint8(value & 0xFF)
