"""
Environment-driven configuration.

Variables:
- ALU_PROGRAM    default program file for the CLI (empty = built-in puzzle program)
- ALU_DIGIT_MIN  smallest input digit (default 1, clamped to [0, 9])
- ALU_DIGIT_MAX  largest input digit (default 9, clamped to [0, 9])
- ALU_LOG_LEVEL  logging level name (default WARNING)

Malformed values fall back to the default instead of failing.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _env_int(env: Mapping[str, str], name: str, default: int, *, lo: int, hi: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return int(default)
    try:
        v = int(raw.strip())
    except ValueError:
        return int(default)
    if v < lo:
        return int(lo)
    if v > hi:
        return int(hi)
    return int(v)


def _env_str(env: Mapping[str, str], name: str, default: str) -> str:
    raw = env.get(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


@dataclass(frozen=True)
class AluConfig:
    program_path: Optional[Path] = None
    digit_min: int = 1
    digit_max: int = 9
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.digit_min > self.digit_max:
            raise ValueError(f"digit_min ({self.digit_min}) > digit_max ({self.digit_max})")

    @property
    def digit_range(self) -> Tuple[int, int]:
        return (self.digit_min, self.digit_max)

    @property
    def digits(self) -> Tuple[int, ...]:
        return tuple(range(self.digit_min, self.digit_max + 1))

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "AluConfig":
        env = os.environ if env is None else env
        program = _env_str(env, "ALU_PROGRAM", "")
        digit_min = _env_int(env, "ALU_DIGIT_MIN", 1, lo=0, hi=9)
        digit_max = _env_int(env, "ALU_DIGIT_MAX", 9, lo=0, hi=9)
        if digit_min > digit_max:
            logger.warning(
                "ALU_DIGIT_MIN=%d > ALU_DIGIT_MAX=%d, using defaults", digit_min, digit_max
            )
            digit_min, digit_max = 1, 9
        level = _env_str(env, "ALU_LOG_LEVEL", "WARNING").upper()
        if level not in _LOG_LEVELS:
            level = "WARNING"
        return cls(
            program_path=Path(program) if program else None,
            digit_min=digit_min,
            digit_max=digit_max,
            log_level=level,
        )
