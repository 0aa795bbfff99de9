"""Display configuration for job summaries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DisplayConfig:
    progress_decimals: int = 1
    placeholder: str = "-"
