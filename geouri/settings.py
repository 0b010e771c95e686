from __future__ import annotations

import os
from dataclasses import dataclass


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = int(raw.strip())
    if value < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {value}")
    return value


@dataclass(frozen=True, slots=True)
class NumberFormatSettings:
    """Fraction digits kept when numbers are written into a geo URI.

    Env vars:
      - GEOURI_COORDINATE_DIGITS: digits for coordinates (default 12)
      - GEOURI_PARAMETER_DIGITS: digits for the u and z values (default 9)

    The defaults round away binary float artifacts such as 0.1 + 0.2.
    """

    coordinate_digits: int = 12
    parameter_digits: int = 9

    @staticmethod
    def from_env() -> "NumberFormatSettings":
        return NumberFormatSettings(
            coordinate_digits=_env_int("GEOURI_COORDINATE_DIGITS", 12),
            parameter_digits=_env_int("GEOURI_PARAMETER_DIGITS", 9),
        )
