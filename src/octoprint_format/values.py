"""Presence checks and numeric coercion for loosely-typed status values.

Status payloads hand us ``None``, empty strings, numbers and numeric strings
interchangeably. ``None`` and ``""`` are the only absent values; ``0``,
``False`` and ``NaN`` are present.
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, TypeVar

from octoprint_format.exceptions import InvalidNumberError

T = TypeVar("T")

# Plain ASCII decimal or exponent notation; no digit separators.
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_NON_FINITE_RE = re.compile(r"[+-]?(?:inf|infinity|nan)", re.ASCII | re.IGNORECASE)


def is_present(value: Any) -> bool:
    """True unless value is None or the empty string."""
    if value is None:
        return False
    if isinstance(value, str) and value == "":
        return False
    return True


def coerce_string(value: T, default: str = "") -> T | str:
    """Return value when present, otherwise default."""
    return value if is_present(value) else default


def parse_number(value: Any) -> float:
    """Read value as a finite float.

    Accepts ints, floats, Decimals and numeric strings in plain ASCII
    decimal or exponent notation (surrounding whitespace is ignored).
    Digit separators such as "1_000" and non-ASCII digits are rejected.

    Raises:
        InvalidNumberError: For booleans, non-numeric strings, other types,
            NaN (including signaling NaN) and infinities.
    """
    if isinstance(value, bool):
        raise InvalidNumberError(f"Not a number: {value!r}")
    if isinstance(value, Decimal) and value.is_nan():
        raise InvalidNumberError(f"Not a finite number: {value!r}")
    if isinstance(value, (int, float, Decimal)):
        try:
            number = float(value)
        except OverflowError as exc:
            raise InvalidNumberError(f"Not a finite number: {value!r}") from exc
    elif isinstance(value, str):
        text = value.strip()
        if not (
            _NUMBER_RE.fullmatch(text)
            or _NON_FINITE_RE.fullmatch(text)
        ):
            raise InvalidNumberError(f"Not a number: {value!r}")
        number = float(text)
    else:
        raise InvalidNumberError(f"Unsupported type {type(value).__name__}: {value!r}")

    if not math.isfinite(number):
        raise InvalidNumberError(f"Not a finite number: {value!r}")
    return number


def _round_half_up(number: float, decimals: int) -> Decimal:
    # str() gives the shortest repr, so 2.675 rounds to 2.68 rather than
    # following its binary expansion down.
    if abs(number) >= 2**53:
        # Already integral, and too wide for the default decimal context.
        return Decimal(int(number))
    exponent = Decimal(1).scaleb(-decimals)
    with localcontext(prec=decimals + 20):
        return Decimal(str(number)).quantize(exponent, rounding=ROUND_HALF_UP)


def coerce_float_rounded(value: Any) -> str | float:
    """Round value to a whole number, returned as a numeric string.

    Absent values give 0.0.
    """
    if not is_present(value):
        return 0.0
    rounded = _round_half_up(parse_number(value), 0)
    # quantize keeps the sign of -0.4 -> "-0"
    if rounded.is_zero():
        return "0"
    return str(rounded)


def round_decimal(value: Any, decimals: int = 1) -> float:
    """Round value to the given number of decimal places. Absent values give 0."""
    if not is_present(value):
        return 0
    if decimals < 0:
        raise ValueError(f"decimals must be >= 0, got {decimals}")
    return float(_round_half_up(parse_number(value), decimals))
