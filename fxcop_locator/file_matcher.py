"""Lookups of analyzer-reported file names against a file inventory."""

import logging
from pathlib import Path

from fxcop_locator.file_inventory import FileInventory

logger = logging.getLogger(__name__)


class FileMatcher:
    """Finds inventory files by exact name, suffix or fallback pattern.

    All queries walk the inventory in its sorted order, so whenever several
    files qualify the lexicographically first path comes first.
    """

    def __init__(self, inventory: FileInventory) -> None:
        """Initialize the matcher over a prebuilt inventory."""
        self.inventory = inventory

    def find_exact(self, name: str) -> Path | None:
        """Return the first file whose name equals name verbatim."""
        hits = [p for p in self.inventory if p.name == name]
        if len(hits) > 1:
            logger.debug(
                "%d files are named %s; using %s", len(hits), name, hits[0]
            )
        return hits[0] if hits else None

    def find_all_by_suffix(self, name: str) -> list[Path]:
        """Return every file ending with name.

        A fragment containing directory separators is matched against the
        tail of the full path, on a separator boundary. A bare name is matched
        against the end of the file name.
        """
        fragment = name.replace("\\", "/").strip("/")
        if not fragment:
            return []
        if "/" in fragment:
            tail = "/" + fragment
            return [p for p in self.inventory if p.as_posix().endswith(tail)]
        return [p for p in self.inventory if p.name.endswith(fragment)]

    def find_files(self, name: str) -> list[Path]:
        """Return all files named name, else all files ending with it."""
        exact = [p for p in self.inventory if p.name == name]
        if exact:
            return exact
        return self.find_all_by_suffix(name)

    def find_fallback(
        self, suffix: str, excluded: tuple[str, ...] = ()
    ) -> Path | None:
        """Return an exact-name match, else the first file ending with suffix.

        Files whose names end with one of the excluded suffixes are ignored.
        """
        for p in self.inventory:
            if p.name == suffix and not p.name.endswith(excluded):
                return p
        for p in self.inventory:
            if p.name.endswith(suffix) and not p.name.endswith(excluded):
                return p
        return None

    def fallback_candidates(
        self, manifest_name: str, source_suffix: str, excluded: tuple[str, ...] = ()
    ) -> list[Path]:
        """Return the manifest file, then the first other source file.

        Either may be missing; generated files listed in excluded never
        qualify.
        """
        found: list[Path] = []
        for pattern in (manifest_name, source_suffix):
            path = self.find_fallback(pattern, excluded)
            if path is not None and path not in found:
                found.append(path)
        return found
