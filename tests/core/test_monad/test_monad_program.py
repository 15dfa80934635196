"""Tests for alu/core/monad/program.py - puzzle program and record codec."""

import pytest

from alu.core.monad import (
    PUZZLE_PROGRAM,
    InstructionKind,
    Keep,
    ProgramFormatError,
    Reduce,
    instruction_from_dict,
    instruction_to_dict,
    program_from_list,
    program_to_list,
)


class TestPuzzleProgram:
    def test_length(self):
        assert len(PUZZLE_PROGRAM) == 14

    def test_balanced_kinds(self):
        kinds = [ins.kind for ins in PUZZLE_PROGRAM]
        assert kinds.count(InstructionKind.KEEP) == 7
        assert kinds.count(InstructionKind.REDUCE) == 7

    def test_first_and_last(self):
        assert PUZZLE_PROGRAM[0] == Keep(12, 9)
        assert PUZZLE_PROGRAM[-1] == Reduce(-3, 12)


class TestRecords:
    def test_to_dict(self):
        assert instruction_to_dict(Reduce(-9, 5)) == {"kind": "reduce", "a": -9, "b": 5}

    def test_from_dict_case_insensitive_kind(self):
        assert instruction_from_dict({"kind": " Keep ", "a": 1, "b": 2}) == Keep(1, 2)

    def test_round_trip(self):
        assert program_from_list(program_to_list(PUZZLE_PROGRAM)) == PUZZLE_PROGRAM

    def test_unknown_kind(self):
        with pytest.raises(ProgramFormatError, match=r"instructions\[0\]\.kind"):
            instruction_from_dict({"kind": "mul", "a": 1, "b": 2})

    def test_missing_coefficient(self):
        with pytest.raises(ProgramFormatError, match="missing 'b'"):
            program_from_list([{"kind": "keep", "a": 1, "b": 2}, {"kind": "keep", "a": 1}])

    def test_bool_coefficient(self):
        with pytest.raises(ProgramFormatError, match=r"\.a must be an int"):
            instruction_from_dict({"kind": "keep", "a": True, "b": 2})

    def test_unknown_field(self):
        with pytest.raises(ProgramFormatError, match="unknown fields"):
            instruction_from_dict({"kind": "keep", "a": 1, "b": 2, "c": 3})

    def test_unknown_fields_with_mixed_key_types(self):
        with pytest.raises(ProgramFormatError, match="unknown fields"):
            instruction_from_dict({"kind": "keep", "a": 1, "b": 2, 1: 3, "c": 4})

    def test_record_not_mapping(self):
        with pytest.raises(ProgramFormatError, match="must be a mapping"):
            program_from_list([["keep", 1, 2]])

    def test_program_not_list(self):
        with pytest.raises(ProgramFormatError):
            program_from_list({"kind": "keep", "a": 1, "b": 2})
