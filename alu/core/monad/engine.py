"""Dispatch-table engine for the MONAD evaluator.

``evaluate(state, digit, instruction)`` is the single step function. It:

1. Computes ``check = (state mod 26) + a`` with truncating remainder.
2. Applies the variant's update rule (identity for ``Keep``, divide by 26 for
   ``Reduce``).
3. On a mismatch (``check != digit``) pushes ``digit + b`` onto the updated
   state in base 26.

``run`` folds ``evaluate`` over a program and a digit sequence; ``trace``
returns every intermediate state. All functions are pure.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional, Sequence, Tuple

from .errors import MonadInputError
from .math import BASE, require_int, trunc_div, trunc_rem
from .types import Instruction, InstructionKind, StepRecord

UpdateFn = Callable[[int], int]


def _keep(state: int) -> int:
    return state


def _reduce(state: int) -> int:
    return trunc_div(state, BASE)


_DISPATCH: dict[InstructionKind, UpdateFn] = {
    InstructionKind.KEEP: _keep,
    InstructionKind.REDUCE: _reduce,
}


def update_state(state: int, instruction: Instruction) -> int:
    require_int("state", state)
    return _DISPATCH[instruction.kind](state)


def is_match(state: int, digit: int, instruction: Instruction) -> bool:
    """True when the step takes the match branch (no push)."""
    require_int("state", state)
    require_int("digit", digit)
    return trunc_rem(state, BASE) + instruction.a == digit


def evaluate(state: int, digit: int, instruction: Instruction) -> int:
    reduced = update_state(state, instruction)
    if is_match(state, digit, instruction):
        return reduced
    return reduced * BASE + digit + instruction.b


def _check_inputs(
    program: Sequence[Instruction],
    digits: Sequence[int],
    digit_range: Optional[Tuple[int, int]],
) -> None:
    if len(program) != len(digits):
        raise MonadInputError(
            f"digit count {len(digits)} does not match instruction count {len(program)}"
        )
    for i, digit in enumerate(digits):
        require_int(f"digits[{i}]", digit)
        if digit_range is not None:
            lo, hi = digit_range
            if not (lo <= digit <= hi):
                raise MonadInputError(f"digits[{i}]={digit} outside [{lo}, {hi}]", index=i)


def trace_steps(
    program: Sequence[Instruction],
    digits: Sequence[int],
    *,
    state: int = 0,
    digit_range: Optional[Tuple[int, int]] = None,
) -> Tuple[StepRecord, ...]:
    """Evaluate the program and keep one `StepRecord` per step."""
    require_int("state", state)
    digits = tuple(digits)
    _check_inputs(program, digits, digit_range)

    records = []
    for i, (instruction, digit) in enumerate(zip(program, digits)):
        after = evaluate(state, digit, instruction)
        records.append(
            StepRecord(
                index=i,
                instruction=instruction,
                digit=digit,
                state_before=state,
                state_after=after,
                matched=is_match(state, digit, instruction),
            )
        )
        state = after
    return tuple(records)


def trace(
    program: Sequence[Instruction],
    digits: Sequence[int],
    *,
    state: int = 0,
    digit_range: Optional[Tuple[int, int]] = None,
) -> Tuple[int, ...]:
    """States after each step, in order (a left scan of `evaluate`)."""
    steps = trace_steps(program, digits, state=state, digit_range=digit_range)
    return tuple(s.state_after for s in steps)


def run(
    program: Sequence[Instruction],
    digits: Sequence[int],
    *,
    state: int = 0,
    digit_range: Optional[Tuple[int, int]] = None,
) -> int:
    """Final state after folding `evaluate` over (instruction, digit) pairs."""
    require_int("state", state)
    digits = tuple(digits)
    _check_inputs(program, digits, digit_range)
    for instruction, digit in zip(program, digits):
        state = evaluate(state, digit, instruction)
    return state


def accepts(
    program: Sequence[Instruction],
    digits: Iterable[int],
    *,
    digit_range: Optional[Tuple[int, int]] = None,
) -> bool:
    """True iff the digits drive the state from 0 back to 0."""
    return run(program, tuple(digits), digit_range=digit_range) == 0
