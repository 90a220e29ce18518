"""Data models for the outcome of resolving a finding to a tracked file."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class Resolved:
    """A finding mapped onto a tracked file.

    When ``exact`` is False the target was guessed by a fallback rule and
    ``message`` carries the uncertainty annotation.
    """

    handle: Any
    path: Path
    line: int
    message: str
    exact: bool


@dataclass(frozen=True)
class Skipped:
    """A finding that cannot be attached to any tracked file."""

    reason: str
    path: Path | None = None  # Last candidate considered, if any


ResolutionOutcome = Resolved | Skipped
