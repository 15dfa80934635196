"""Program construction and serialization for the MONAD evaluator.

`PUZZLE_PROGRAM` is the puzzle input with its coefficients extracted by hand
from the ALU listing (one block of 18 ALU instructions per input digit).

Record format (one per instruction):
    {"kind": "keep" | "reduce", "a": int, "b": int}

Round-trip property (tested): `program_from_list(program_to_list(p)) == p`.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from .errors import ProgramFormatError
from .types import Instruction, InstructionKind, Keep, Program, Reduce

PUZZLE_PROGRAM: Program = (
    Keep(12, 9),
    Keep(12, 4),
    Keep(12, 2),
    Reduce(-9, 5),
    Reduce(-9, 1),
    Keep(14, 6),
    Keep(14, 11),
    Reduce(-10, 15),
    Keep(15, 7),
    Reduce(-2, 12),
    Keep(11, 15),
    Reduce(-15, 9),
    Reduce(-9, 12),
    Reduce(-3, 12),
)

_KINDS_BY_VALUE: dict[str, InstructionKind] = {k.value: k for k in InstructionKind}


def instruction_to_dict(instruction: Instruction) -> dict[str, Any]:
    return {"kind": instruction.kind.value, "a": instruction.a, "b": instruction.b}


def instruction_from_dict(d: Mapping[str, Any], *, index: int = 0) -> Instruction:
    """Decode one record. Raises ProgramFormatError on any malformed field."""
    if not isinstance(d, Mapping):
        raise ProgramFormatError(f"instructions[{index}] must be a mapping")

    raw_kind = d.get("kind")
    if not isinstance(raw_kind, str) or raw_kind.strip().lower() not in _KINDS_BY_VALUE:
        raise ProgramFormatError(
            f"instructions[{index}].kind must be one of {sorted(_KINDS_BY_VALUE)}: {raw_kind!r}"
        )
    kind = _KINDS_BY_VALUE[raw_kind.strip().lower()]

    coeffs: dict[str, int] = {}
    for name in ("a", "b"):
        if name not in d:
            raise ProgramFormatError(f"instructions[{index}] is missing {name!r}")
        val = d[name]
        if not isinstance(val, int) or isinstance(val, bool):
            raise ProgramFormatError(f"instructions[{index}].{name} must be an int: {val!r}")
        coeffs[name] = int(val)

    extra = set(d) - {"kind", "a", "b"}
    if extra:
        raise ProgramFormatError(f"instructions[{index}] has unknown fields: {sorted(extra, key=str)}")

    return Instruction(kind, coeffs["a"], coeffs["b"])


def program_to_list(program: Iterable[Instruction]) -> list[dict[str, Any]]:
    return [instruction_to_dict(ins) for ins in program]


def program_from_list(records: Iterable[Mapping[str, Any]]) -> Program:
    if isinstance(records, (str, bytes, Mapping)):
        raise ProgramFormatError("instructions must be a list of records")
    return tuple(instruction_from_dict(rec, index=i) for i, rec in enumerate(records))
