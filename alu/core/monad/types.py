"""Data types for the MONAD evaluator.

All types are frozen dataclasses (immutable). An instruction is a tagged
variant: the `kind` tag selects the state update rule, and both variants carry
the same pair of integer coefficients.

Conventions:
- `a` is added to `state mod 26` and compared against the input digit.
- `b` is added to the pushed digit on a mismatch.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique
from typing import Tuple

from .math import require_int


@unique
class InstructionKind(Enum):
    """One member per instruction variant."""
    KEEP = "keep"
    REDUCE = "reduce"


@dataclass(frozen=True)
class Instruction:
    """A single MONAD step: `Keep(a, b)` or `Reduce(a, b)`."""

    kind: InstructionKind
    a: int
    b: int

    def __post_init__(self) -> None:
        if not isinstance(self.kind, InstructionKind):
            raise TypeError("kind must be an InstructionKind")
        require_int("a", self.a)
        require_int("b", self.b)

    def __repr__(self) -> str:
        return f"{self.kind.name.capitalize()}({self.a}, {self.b})"


def Keep(a: int, b: int) -> Instruction:
    return Instruction(InstructionKind.KEEP, a, b)


def Reduce(a: int, b: int) -> Instruction:
    return Instruction(InstructionKind.REDUCE, a, b)


Program = Tuple[Instruction, ...]


@dataclass(frozen=True)
class StepRecord:
    """One row of an evaluation trace."""

    index: int
    instruction: Instruction
    digit: int
    state_before: int
    state_after: int
    matched: bool
