from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DurationPart:
    """One unit component of a duration label, e.g. (3, "h")."""

    magnitude: int
    unit: str

    def __str__(self) -> str:
        return f"{self.magnitude}{self.unit}"


@dataclass(frozen=True)
class JobSummary:
    """Display-ready view of an OctoPrint job status payload."""

    file_name: str
    state: str
    progress: float
    elapsed: str
    remaining: str
