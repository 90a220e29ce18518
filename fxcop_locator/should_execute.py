"""Logic for deciding whether a project has anything for FxCop to report on."""

import logging
from collections.abc import Iterable
from pathlib import Path

from fxcop_locator.rule_profile import RuleProfile

logger = logging.getLogger(__name__)


def should_execute(language_files: Iterable[Path], profile: RuleProfile) -> bool:
    """Return True if there are tracked files and at least one active rule."""
    if not any(True for _ in language_files):
        return False
    if profile.is_empty:
        logger.info("All FxCop rules are disabled, skipping its execution.")
        return False
    return True
