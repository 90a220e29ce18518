"""Data model for a fully qualified rule identity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RuleKey:
    """Identifies a rule within a rule repository."""

    repository: str
    rule: str

    def __str__(self) -> str:
        """Render as repository:rule."""
        return f"{self.repository}:{self.rule}"
