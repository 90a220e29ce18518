"""Data model for a single FxCop finding read from a report."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Finding:
    """Represents one static-analysis result as reported by FxCop."""

    path: str | None
    file: str | None  # Bare name or relative fragment
    line: int | None
    message: str
    rule_config_key: str
    report_line: int | None = None  # Line in the report, for diagnostics

    @property
    def has_file(self) -> bool:
        """Return True when both the directory and the file name are known."""
        return self.path is not None and self.file is not None
