from __future__ import annotations

import logging
from pathlib import Path

import pytest

from alu.config import AluConfig


def test_defaults() -> None:
    cfg = AluConfig.from_env({})
    assert cfg == AluConfig()
    assert cfg.program_path is None
    assert cfg.digit_range == (1, 9)
    assert cfg.digits == (1, 2, 3, 4, 5, 6, 7, 8, 9)
    assert cfg.log_level == "WARNING"


def test_values_from_env() -> None:
    cfg = AluConfig.from_env(
        {"ALU_PROGRAM": " monad.yaml ", "ALU_DIGIT_MIN": "2", "ALU_DIGIT_MAX": "7", "ALU_LOG_LEVEL": "debug"}
    )
    assert cfg.program_path == Path("monad.yaml")
    assert cfg.digits == (2, 3, 4, 5, 6, 7)
    assert cfg.log_level == "DEBUG"


def test_malformed_values_fall_back() -> None:
    cfg = AluConfig.from_env({"ALU_DIGIT_MIN": "x", "ALU_DIGIT_MAX": "42", "ALU_LOG_LEVEL": "loud"})
    assert cfg.digit_range == (1, 9)
    assert cfg.log_level == "WARNING"


def test_inverted_range_uses_defaults(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="alu.config"):
        cfg = AluConfig.from_env({"ALU_DIGIT_MIN": "8", "ALU_DIGIT_MAX": "3"})
    assert cfg.digit_range == (1, 9)
    assert [r.name for r in caplog.records] == ["alu.config"]
    assert "ALU_DIGIT_MIN=8 > ALU_DIGIT_MAX=3" in caplog.text


def test_direct_construction_validates() -> None:
    with pytest.raises(ValueError):
        AluConfig(digit_min=5, digit_max=4)
