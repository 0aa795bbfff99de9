"""Syntactic JSON validation for raw status strings."""

from __future__ import annotations

import json
import logging
from typing import Any

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def is_valid_json(text: Any) -> bool:
    """True iff text is a non-empty string holding strict JSON.

    NaN and Infinity literals are rejected. Integers are not converted, so
    arbitrarily long ones are accepted. Never raises.
    """
    if not isinstance(text, str):
        return False
    if text == "":
        return False

    try:
        json.loads(text, parse_int=str, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        logger.debug("Invalid JSON string (%d chars): %s", len(text), exc)
        return False
    return True
