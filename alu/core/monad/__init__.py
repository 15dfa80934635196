"""`monad`: pure-Python evaluator for the MONAD instruction set.

A program is a tuple of `Keep(a, b)` / `Reduce(a, b)` instructions. Evaluation
folds one input digit per instruction into a single integer state:
- deterministic, integer-only transitions,
- immutable instructions (frozen dataclasses),
- truncating (toward zero) division and remainder.

Public API:
- `evaluate(state, digit, instruction) -> int`
- `run(program, digits) -> int`
- `trace(program, digits) -> tuple[int, ...]`
- `accepts(program, digits) -> bool`
"""

from .engine import (
    accepts,
    evaluate,
    is_match,
    run,
    trace,
    trace_steps,
    update_state,
)
from .errors import MonadError, MonadInputError, ProgramFormatError
from .math import BASE, to_number, trunc_div, trunc_rem
from .program import (
    PUZZLE_PROGRAM,
    instruction_from_dict,
    instruction_to_dict,
    program_from_list,
    program_to_list,
)
from .types import Instruction, InstructionKind, Keep, Program, Reduce, StepRecord

__all__ = [
    "evaluate",
    "update_state",
    "is_match",
    "run",
    "trace",
    "trace_steps",
    "accepts",
    "BASE",
    "trunc_div",
    "trunc_rem",
    "to_number",
    "PUZZLE_PROGRAM",
    "instruction_to_dict",
    "instruction_from_dict",
    "program_to_list",
    "program_from_list",
    "Instruction",
    "InstructionKind",
    "Keep",
    "Reduce",
    "Program",
    "StepRecord",
    "MonadError",
    "MonadInputError",
    "ProgramFormatError",
]
