"""Decides which tracked file, if any, a finding is attached to."""

import logging
from pathlib import Path

from fxcop_locator.file_inventory import build_inventory
from fxcop_locator.file_matcher import FileMatcher
from fxcop_locator.finding import Finding
from fxcop_locator.locator_config import LocatorConfig
from fxcop_locator.registry import Registry
from fxcop_locator.resolution_outcome import ResolutionOutcome, Resolved, Skipped

logger = logging.getLogger(__name__)

NO_FILE_REFERENCE = "no file reference"
GENERATED_FILE = "generated/excluded file, not tracked"
NOT_TRACKED = "file is not tracked"
NO_FALLBACK = "no fallback file is tracked"
OTHER_LANGUAGE = "file belongs to a different language"


class ResolutionPolicy:
    """Resolves findings of one project root to files known to the registry.

    Resolution tiers, in order:
    1. A finding without a file name goes straight to the manifest fallback.
    2. The reported directory joined with the file name, if tracked, is exact.
    3. Otherwise files with the reported name are searched in the project
       tree and the first tracked one wins, flagged as a guess. Generated
       files never fall back; other source files fall back to the manifest.
    A resolved file must finally belong to the configured language.
    """

    def __init__(
        self, registry: Registry, project_root: Path | str, config: LocatorConfig
    ) -> None:
        """Initialize the policy for a project root."""
        self.registry = registry
        self.project_root = Path(project_root)
        self.config = config
        self._matcher: FileMatcher | None = None

    @property
    def matcher(self) -> FileMatcher:
        """Matcher over the project tree, indexed on first use."""
        if self._matcher is None:
            self._matcher = FileMatcher(build_inventory(self.project_root))
        return self._matcher

    def resolve(self, finding: Finding) -> ResolutionOutcome:
        """Resolve a finding to a Resolved or Skipped outcome."""
        outcome = self._locate(finding)
        if isinstance(outcome, Resolved):
            outcome = self._check_language(outcome)
        if isinstance(outcome, Skipped):
            _log_skip(finding, outcome)
        return outcome

    def _locate(self, finding: Finding) -> ResolutionOutcome:
        if finding.file is None:
            return self._fallback(finding, NO_FILE_REFERENCE)

        line = _effective_line(finding.line)
        if finding.has_file:
            direct = self._direct_path(finding)
            handle = self.registry.lookup(direct)
            if handle is not None:
                return Resolved(handle, direct, line, finding.message, exact=True)

        candidates = self.matcher.find_files(finding.file)
        # Same-named files in different directories: first tracked one wins
        for candidate in candidates:
            handle = self.registry.lookup(candidate)
            if handle is not None:
                return Resolved(
                    handle, candidate, line, self._annotate(finding), exact=False
                )

        if self.config.is_generated(finding.file):
            return Skipped(GENERATED_FILE, candidates[0] if candidates else None)
        if not candidates:
            return self._fallback(finding, NOT_TRACKED)
        if finding.file.endswith(self.config.source_suffix):
            return self._fallback(finding, NOT_TRACKED)
        return Skipped(NOT_TRACKED, candidates[0])

    def _fallback(self, finding: Finding, reason: str) -> ResolutionOutcome:
        """Attach to the manifest file, else any source file, at line 1."""
        candidates = self.matcher.fallback_candidates(
            self.config.manifest_file,
            self.config.source_suffix,
            self.config.generated_suffixes,
        )
        for path in candidates:
            handle = self.registry.lookup(path)
            if handle is not None:
                return Resolved(handle, path, 1, self._annotate(finding), exact=False)
        if not candidates:
            return Skipped(reason)
        return Skipped(f"{reason}; {NO_FALLBACK}", candidates[-1])

    def _direct_path(self, finding: Finding) -> Path:
        """Join the reported directory and file, relative to the project root."""
        directory = Path(str(finding.path))
        if not directory.is_absolute():
            directory = self.project_root / directory
        return (directory / str(finding.file)).absolute()

    def _check_language(self, outcome: Resolved) -> ResolutionOutcome:
        if self.registry.language(outcome.handle) != self.config.language_key:
            return Skipped(OTHER_LANGUAGE, outcome.path)
        return outcome

    def _annotate(self, finding: Finding) -> str:
        return finding.message + self.config.uncertainty_annotation


def _effective_line(line: int | None) -> int:
    if line is None or line < 1:
        return 1
    return line


def _log_skip(finding: Finding, outcome: Skipped) -> None:
    where = f' whose file "{outcome.path}"' if outcome.path else ""
    logger.debug(
        "Skipping the FxCop issue at line %s%s: %s",
        finding.report_line,
        where,
        outcome.reason,
    )
