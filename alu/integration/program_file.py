"""
Loading and saving MONAD programs as structured documents.

Accepted shapes (YAML or JSON; JSON is valid YAML so one parser reads both):

    - {kind: keep, a: 12, b: 9}
    - {kind: reduce, a: -9, b: 5}

or a mapping with an `instructions` list and an optional `digits` entry:

    instructions:
      - {kind: keep, a: 12, b: 9}
    digits: "3"

The coefficients are extracted from the ALU listing by hand; this module does not
read ALU assembly text.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Tuple, Union

import yaml

from ..core.monad.errors import ProgramFormatError
from ..core.monad.program import program_from_list, program_to_list
from ..core.monad.types import Program


@dataclass(frozen=True)
class ProgramDocument:
    program: Program
    digits: Optional[Tuple[int, ...]] = None


_DECIMAL = frozenset("0123456789")


def parse_digits(raw: Any) -> Tuple[int, ...]:
    """
    Digits from a list of ints or a string of ASCII decimal digits.

    parse_digits("1357") == (1, 3, 5, 7); whitespace and `_` separators are ignored.
    """
    if isinstance(raw, (bool, int)):
        # unquoted YAML numbers lose leading zeros (and 0-prefixed ones read as octal)
        raise ProgramFormatError(f"digits must be a quoted string or a list of ints, not a number: {raw!r}")
    if isinstance(raw, str):
        text = "".join(raw.split()).replace("_", "")
        if not text or not all(ch in _DECIMAL for ch in text):
            raise ProgramFormatError(f"digits must be a non-empty string of decimal digits: {raw!r}")
        return tuple(int(ch) for ch in text)
    if isinstance(raw, (list, tuple)):
        out = []
        for i, v in enumerate(raw):
            if not isinstance(v, int) or isinstance(v, bool):
                raise ProgramFormatError(f"digits[{i}] must be an int: {v!r}")
            out.append(int(v))
        return tuple(out)
    raise ProgramFormatError("digits must be a string or a list of ints")


def parse_document(obj: Any) -> ProgramDocument:
    if isinstance(obj, list):
        return ProgramDocument(program=program_from_list(obj))
    if isinstance(obj, dict):
        if "instructions" not in obj:
            raise ProgramFormatError("program document is missing 'instructions'")
        extra = set(obj) - {"instructions", "digits"}
        if extra:
            raise ProgramFormatError(f"program document has unknown keys: {sorted(extra, key=str)}")
        program = program_from_list(obj["instructions"])
        digits = parse_digits(obj["digits"]) if obj.get("digits") is not None else None
        return ProgramDocument(program=program, digits=digits)
    raise ProgramFormatError("program document must be a list or a mapping")


def load_document(path: Union[str, Path]) -> ProgramDocument:
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ProgramFormatError(f"cannot read program file {path}: {exc}") from exc
    try:
        obj = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ProgramFormatError(f"invalid program file {path}: {exc}") from exc
    return parse_document(obj)


def load_program(path: Union[str, Path]) -> Program:
    return load_document(path).program


def dump_program(program: Program, path: Union[str, Path], *, digits: Optional[Tuple[int, ...]] = None) -> None:
    doc: dict[str, Any] = {"instructions": program_to_list(program)}
    if digits is not None:
        doc["digits"] = "".join(str(d) for d in digits)
    text = yaml.safe_dump(doc, sort_keys=False, default_flow_style=None)
    Path(path).write_text(text, encoding="utf-8")
