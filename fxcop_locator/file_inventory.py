"""Logic for enumerating every file under a project root."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileInventory:
    """Deduplicated absolute file paths, iterated in lexicographic order."""

    root: Path
    paths: tuple[Path, ...]

    def __iter__(self) -> Iterator[Path]:
        """Iterate over the paths in sorted order."""
        return iter(self.paths)

    def __len__(self) -> int:
        """Return the number of files."""
        return len(self.paths)

    def __contains__(self, path: object) -> bool:
        """Return True if the path is part of the inventory."""
        return path in self.paths


def build_inventory(root: Path | str) -> FileInventory:
    """Recursively collect all regular files under root.

    Directories are recursed into, everything else is ignored. The tree is
    assumed to be free of symlink cycles.
    """
    base = Path(root).absolute()
    if not base.is_dir():
        logger.debug("Project root %s is not a directory; inventory is empty", base)
        return FileInventory(base, ())

    found: set[Path] = set()
    _walk(base, found)
    paths = tuple(sorted(found, key=str))
    logger.debug("Indexed %d files under %s", len(paths), base)
    return FileInventory(base, paths)


def _walk(directory: Path, found: set[Path]) -> None:
    for entry in directory.iterdir():
        if entry.is_file():
            found.add(entry)
        elif entry.is_dir():
            _walk(entry, found)
