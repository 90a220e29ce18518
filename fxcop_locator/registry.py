"""Interfaces of the host platform that tracks files and receives issues."""

from pathlib import Path
from typing import Any, Protocol

from fxcop_locator.rule_key import RuleKey


class Registry(Protocol):
    """Host index of the files that issues can be attached to."""

    def lookup(self, path: Path) -> Any | None:
        """Return a handle for the absolute path, or None if not tracked."""

    def language(self, handle: Any) -> str | None:
        """Return the language key declared for the handle."""

    def add_issue(
        self, handle: Any, rule_key: RuleKey, line: int, message: str
    ) -> None:
        """Attach an issue to the file behind the handle."""
