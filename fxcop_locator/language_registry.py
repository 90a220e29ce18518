"""A registry that tracks files by extension and records issues in memory."""

from dataclasses import dataclass, field
from pathlib import Path

from fxcop_locator.file_inventory import build_inventory
from fxcop_locator.rule_key import RuleKey


@dataclass(frozen=True)
class FileHandle:
    """A tracked file and its language."""

    path: Path
    language: str


@dataclass(frozen=True)
class Issue:
    """An issue attached to a tracked file."""

    path: Path
    rule_key: RuleKey
    line: int
    message: str


@dataclass
class LanguageRegistry:
    """Tracks every file under a root whose extension maps to a language."""

    handles: dict[Path, FileHandle] = field(default_factory=dict)
    issues: list[Issue] = field(default_factory=list)

    @classmethod
    def from_tree(
        cls, root: Path | str, language_extensions: dict[str, list[str]]
    ) -> "LanguageRegistry":
        """Track files under root whose suffix belongs to a configured language."""
        by_suffix = {
            ext.lower(): lang
            for lang, exts in language_extensions.items()
            for ext in exts
        }
        registry = cls()
        for path in build_inventory(root):
            lang = by_suffix.get(path.suffix.lower())
            if lang is not None:
                registry.track(path, lang)
        return registry

    def track(self, path: Path, language: str) -> FileHandle:
        """Start tracking a file."""
        handle = FileHandle(Path(path).absolute(), language)
        self.handles[handle.path] = handle
        return handle

    def lookup(self, path: Path) -> FileHandle | None:
        """Return the handle for a tracked absolute path."""
        return self.handles.get(Path(path).absolute())

    def language(self, handle: FileHandle) -> str | None:
        """Return the language declared for the handle."""
        return handle.language

    def add_issue(
        self, handle: FileHandle, rule_key: RuleKey, line: int, message: str
    ) -> None:
        """Record an issue against the handle's file."""
        self.issues.append(Issue(handle.path, rule_key, line, message))

    def files_of_language(self, language: str) -> list[Path]:
        """Return tracked paths of a language, sorted."""
        return sorted(
            (h.path for h in self.handles.values() if h.language == language),
            key=str,
        )
