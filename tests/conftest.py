"""Shared fixtures for building project trees and registries."""

from collections.abc import Callable
from pathlib import Path

import pytest

from fxcop_locator.language_registry import LanguageRegistry

MakeTree = Callable[[list[str]], list[Path]]


@pytest.fixture
def make_tree(tmp_path: Path) -> MakeTree:
    """Return a helper creating empty files under tmp_path."""

    def _make(files: list[str]) -> list[Path]:
        created = []
        for rel in files:
            p = tmp_path / rel
            p.parent.mkdir(parents=True, exist_ok=True)
            p.write_text("", encoding="utf-8")
            created.append(p.absolute())
        return created

    return _make


@pytest.fixture
def registry() -> LanguageRegistry:
    """An empty registry; tests track the files they need."""
    return LanguageRegistry()
