"""Compact duration labels for print times (e.g. '1d 26h 3m')."""

from __future__ import annotations

import math
from typing import Any

from octoprint_format.models import DurationPart
from octoprint_format.values import is_present, parse_number

SECONDS_PER_DAY = 86400
SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60


def duration_parts(seconds: Any) -> list[DurationPart]:
    """Split a duration into its displayed (magnitude, unit) components.

    Hours count from the total, so they include the days' worth of hours:
    90000s is 1d and 25h. Seconds appear only when days, hours and minutes
    are all zero. Absent and negative input count as zero.
    """
    total = parse_number(seconds) if is_present(seconds) else 0.0
    total = max(0.0, total)

    days = math.floor(total / SECONDS_PER_DAY)
    hours = math.floor(total / SECONDS_PER_HOUR)
    minutes = math.floor((total % SECONDS_PER_HOUR) / SECONDS_PER_MINUTE)
    secs = math.floor(total % SECONDS_PER_MINUTE)

    parts: list[DurationPart] = []
    if days > 0:
        parts.append(DurationPart(days, "d"))
    if hours > 0:
        parts.append(DurationPart(hours, "h"))
    if minutes > 0:
        parts.append(DurationPart(minutes, "m"))
    if not parts:
        parts.append(DurationPart(secs, "s"))
    return parts


def format_duration(seconds: Any) -> str:
    """Format a duration in seconds as a compact label (e.g. '1h 1m', '45s')."""
    return " ".join(str(part) for part in duration_parts(seconds))
