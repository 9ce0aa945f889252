
from .api import RunResult, run_file, run_string
from .config import DEFAULT_TAPE_SIZE, EOFPolicy, RunOptions
from .errors import (
    BFIError,
    BFIParseError,
    BFIRuntimeError,
    EvaluationTooDeep,
    InputExhausted,
    LoopNestingTooDeep,
    PointerOutOfBounds,
    UnmatchedLoopClose,
    UnterminatedLoop,
)
from .evaluator import execute, run
from .lexer import Token, tokenize
from .nodes import count_ops, emit
from .parser import build_tree, parse
from .state import ExecutionState

__all__ = [
    'Token',
    'tokenize',
    'parse',
    'build_tree',
    'emit',
    'count_ops',
    'run',
    'execute',
    'ExecutionState',
    'EOFPolicy',
    'RunOptions',
    'DEFAULT_TAPE_SIZE',
    'RunResult',
    'run_string',
    'run_file',
    'BFIError',
    'BFIParseError',
    'BFIRuntimeError',
    'UnmatchedLoopClose',
    'UnterminatedLoop',
    'PointerOutOfBounds',
    'InputExhausted',
    'LoopNestingTooDeep',
    'EvaluationTooDeep',
]
