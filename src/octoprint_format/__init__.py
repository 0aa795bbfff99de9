"""Formatting and validation helpers for the OctoPrint monitor widget."""

from octoprint_format.formatting import duration_parts, format_duration
from octoprint_format.jsoncheck import is_valid_json
from octoprint_format.values import (
    coerce_float_rounded,
    coerce_string,
    is_present,
    parse_number,
    round_decimal,
)

__all__ = [
    "coerce_float_rounded",
    "coerce_string",
    "duration_parts",
    "format_duration",
    "is_present",
    "is_valid_json",
    "parse_number",
    "round_decimal",
]
