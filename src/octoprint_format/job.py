"""Build display-ready summaries from OctoPrint job payloads."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from octoprint_format.config import DisplayConfig
from octoprint_format.exceptions import InvalidPayloadError
from octoprint_format.formatting import format_duration
from octoprint_format.models import JobSummary
from octoprint_format.values import coerce_string, round_decimal

logger = logging.getLogger(__name__)


def _section(payload: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    section = payload.get(key)
    return section if isinstance(section, Mapping) else {}


def summarize_job(
    payload: Mapping[str, Any], config: DisplayConfig | None = None
) -> JobSummary:
    """Summarize an OctoPrint ``/api/job`` response for display.

    Missing keys are treated as absent values: strings fall back to the
    configured placeholder, progress to 0 and times to "0s".

    Raises:
        InvalidPayloadError: If payload is not a mapping.
        InvalidNumberError: If a present progress or time value is not numeric.
    """
    if not isinstance(payload, Mapping):
        raise InvalidPayloadError(
            f"Job payload must be an object, got {type(payload).__name__}"
        )
    config = config or DisplayConfig()

    file_info = _section(_section(payload, "job"), "file")
    progress = _section(payload, "progress")
    if not progress:
        logger.debug("Job payload has no progress section")

    # OctoPrint only sets "display" for uploads renamed by the user
    file_name = coerce_string(file_info.get("display"), "")
    if not file_name:
        file_name = coerce_string(file_info.get("name"), config.placeholder)

    return JobSummary(
        file_name=str(file_name),
        state=str(coerce_string(payload.get("state"), config.placeholder)),
        progress=round_decimal(progress.get("completion"), config.progress_decimals),
        elapsed=format_duration(progress.get("printTime")),
        remaining=format_duration(progress.get("printTimeLeft")),
    )
