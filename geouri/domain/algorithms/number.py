from __future__ import annotations

import math
import re

from geouri.domain.exceptions import NonFiniteNumber

_NUMERIC_PREFIX_RE = re.compile(
    r"[+-]?(?:Infinity|(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)"
)
_TRAILING_ZEROS_RE = re.compile(r"\.?0+$")


def parse_number(text: str | None) -> float | None:
    """Parse the longest numeric prefix of ``text``.

    Trailing garbage is ignored, so ``"12abc"`` reads as 12. Returns None when
    there's no numeric prefix at all.
    """

    if text is None:
        return None
    m = _NUMERIC_PREFIX_RE.match(text.lstrip())
    if not m:
        return None
    token = m.group(0)
    if token.endswith("Infinity"):
        return -math.inf if token.startswith("-") else math.inf
    return float(token)


def format_number(value: float, max_decimal_digits: int) -> str:
    """Fixed-point notation with at most ``max_decimal_digits`` fraction digits."""

    if not math.isfinite(value):
        raise NonFiniteNumber(f"Unexpected nonfinite number {value}")
    fixed = f"{value:.{max_decimal_digits}f}"
    if "." in fixed:
        fixed = _TRAILING_ZEROS_RE.sub("", fixed)
    # Negative zero and negatives rounded to zero.
    return "0" if fixed == "-0" else fixed
