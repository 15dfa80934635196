"""
Model-number search for MONAD programs.

A digit sequence is valid when `run(program, digits) == 0`. The search is a
depth-first walk over one digit per instruction, memoized on
`(step_index, state)`: two prefixes that reach the same state at the same step
have exactly the same set of valid suffixes, so each node is solved once and
summarized as `(count, smallest_suffix, largest_suffix)`.

Pruning (only when every pushed value `digit + b` is positive):
- A `Keep` step never shrinks a non-negative state and a `Reduce` step shrinks it
  by at most a factor of 26.
- A `Keep` step whose `a` puts `(z mod 26) + a` outside the digit range for every
  non-negative `z` always pushes, growing the state by at least a factor of 26.
- With `r` the `Reduce` steps left and `p` the forced pushes left, a state
  `z >= 26**max(r - p, 0)` can never get back to 0 and the branch is cut.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from .monad.engine import evaluate
from .monad.math import BASE, require_int, to_number
from .monad.types import Instruction, InstructionKind

logger = logging.getLogger(__name__)

Digits = Tuple[int, ...]
_Node = Tuple[int, Optional[Digits], Optional[Digits]]

DEFAULT_DIGITS: Tuple[int, ...] = tuple(range(1, 10))


@dataclass(frozen=True)
class SolveResult:
    smallest: Optional[Digits]
    largest: Optional[Digits]
    count: int

    @property
    def smallest_number(self) -> Optional[int]:
        return None if self.smallest is None else to_number(self.smallest)

    @property
    def largest_number(self) -> Optional[int]:
        return None if self.largest is None else to_number(self.largest)


class Solver:
    """Memoized search over the valid digit sequences of one program."""

    def __init__(self, program: Sequence[Instruction], *, digits: Iterable[int] = DEFAULT_DIGITS) -> None:
        self.program: Tuple[Instruction, ...] = tuple(program)
        candidates = sorted(set(digits))
        if not candidates:
            raise ValueError("digits must be non-empty")
        for i, d in enumerate(candidates):
            require_int(f"digits[{i}]", d)
        self.digits: Tuple[int, ...] = tuple(candidates)

        # slack[i] = (Reduce steps) - (forced pushes) in program[i:]
        slack = [0] * (len(self.program) + 1)
        for i in range(len(self.program) - 1, -1, -1):
            slack[i] = slack[i + 1] + self._slack_delta(self.program[i])
        self._bounds: Tuple[int, ...] = tuple(BASE ** max(k, 0) for k in slack)

        min_b = min((ins.b for ins in self.program), default=0)
        self.prune: bool = self.digits[0] + min_b >= 1

        self._cache: dict[Tuple[int, int], _Node] = {}
        self.pruned = 0

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def _slack_delta(self, instruction: Instruction) -> int:
        if instruction.kind is InstructionKind.REDUCE:
            return 1
        lo, hi = self.digits[0], self.digits[-1]
        # (z mod 26) + a ranges over [a, a + 25] for z >= 0
        if instruction.a > hi or instruction.a + BASE - 1 < lo:
            return -1
        return 0

    def _dead(self, index: int, state: int) -> bool:
        return self.prune and state >= 0 and state >= self._bounds[index]

    def _solve(self, index: int, state: int) -> _Node:
        if index >= len(self.program):
            return (1, (), ()) if state == 0 else (0, None, None)

        key = (index, state)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        if self._dead(index, state):
            self.pruned += 1
            node: _Node = (0, None, None)
            self._cache[key] = node
            return node

        instruction = self.program[index]
        count = 0
        smallest: Optional[Digits] = None
        largest: Optional[Digits] = None
        for digit in self.digits:
            sub_count, sub_small, sub_large = self._solve(index + 1, evaluate(state, digit, instruction))
            if sub_count == 0:
                continue
            count += sub_count
            # Digits ascend, so the first hit holds the smallest suffix and the last the largest.
            if smallest is None:
                smallest = (digit,) + sub_small  # type: ignore[operator]
            largest = (digit,) + sub_large  # type: ignore[operator]

        node = (count, smallest, largest)
        self._cache[key] = node
        return node

    def solve(self) -> SolveResult:
        count, smallest, largest = self._solve(0, 0)
        logger.debug(
            "solved program of %d steps: matches=%d cache=%d pruned=%d",
            len(self.program),
            count,
            self.cache_size,
            self.pruned,
        )
        return SolveResult(smallest=smallest, largest=largest, count=count)


def solve(program: Sequence[Instruction], *, digits: Iterable[int] = DEFAULT_DIGITS) -> SolveResult:
    return Solver(program, digits=digits).solve()
