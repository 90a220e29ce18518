"""Entry point resolving a batch of findings and registering them as issues."""

import logging
from collections.abc import Iterable
from pathlib import Path

from fxcop_locator.finding import Finding
from fxcop_locator.issue_emitter import IssueEmitter
from fxcop_locator.locator_config import LocatorConfig
from fxcop_locator.registry import Registry
from fxcop_locator.resolution_outcome import Resolved
from fxcop_locator.resolution_policy import ResolutionPolicy
from fxcop_locator.resolution_report import ResolutionReport
from fxcop_locator.rule_profile import RuleProfile

logger = logging.getLogger(__name__)


def resolve_and_emit(
    findings: Iterable[Finding],
    project_root: Path | str,
    target_language_key: str,
    *,
    registry: Registry,
    profile: RuleProfile,
    config: LocatorConfig | None = None,
) -> ResolutionReport:
    """Attach every resolvable finding to its file, in report order.

    Unattachable findings are skipped and recorded in the report. An unmapped
    rule config key aborts the batch with UnmappedRuleKeyError.
    """
    cfg = (config or LocatorConfig.default()).with_language(target_language_key)
    policy = ResolutionPolicy(registry, project_root, cfg)
    emitter = IssueEmitter(registry, profile)
    report = ResolutionReport(cfg.config_hash)

    for finding in findings:
        outcome = policy.resolve(finding)
        if isinstance(outcome, Resolved):
            emitter.emit(
                outcome.handle, finding.rule_config_key, outcome.line, outcome.message
            )
        report.add_result(finding, outcome)

    stats = report.compute_stats()
    logger.info(
        "Resolved %d findings exactly, %d by guess, skipped %d",
        stats["exact"],
        stats["degraded"],
        stats["skipped"],
    )
    return report
