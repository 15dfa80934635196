"""
Core MONAD algorithms
"""

from .monad import (
    PUZZLE_PROGRAM,
    Instruction,
    InstructionKind,
    Keep,
    Reduce,
    accepts,
    evaluate,
    run,
    trace,
    update_state,
)
from .solver import SolveResult, Solver, solve

__all__ = [
    "PUZZLE_PROGRAM",
    "Instruction",
    "InstructionKind",
    "Keep",
    "Reduce",
    "accepts",
    "evaluate",
    "run",
    "trace",
    "update_state",
    "SolveResult",
    "Solver",
    "solve",
]
