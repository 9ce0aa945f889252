from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np

from .config import RunOptions
from .evaluator import run
from .parser import parse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunResult:
    output: bytes
    memory: np.ndarray
    pointer: int


def run_string(source: str, *, input_data: bytes = b"", options: Optional[RunOptions] = None) -> RunResult:
    tree = parse(source)
    sink = io.BytesIO()
    state = run(tree, io.BytesIO(input_data), sink, options)
    return RunResult(output=sink.getvalue(), memory=state.memory.copy(), pointer=int(state.pointer))


def run_file(
    path: str | Path,
    *,
    input_data: bytes = b"",
    options: Optional[RunOptions] = None,
    encoding: str = "utf-8",
) -> RunResult:
    p = Path(path)
    logger.debug("loading program from %s", p)
    return run_string(p.read_text(encoding=encoding, errors="replace"), input_data=input_data, options=options)
