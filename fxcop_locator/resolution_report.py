"""Logic for summarizing the outcomes of a resolution pass."""

import json
import time
from pathlib import Path
from typing import Any

from fxcop_locator.finding import Finding
from fxcop_locator.resolution_outcome import ResolutionOutcome, Resolved


class ResolutionReport:
    """Collects the outcome of every finding processed in one pass."""

    def __init__(self, config_hash: str) -> None:
        """Initialize the report with the hash of the active configuration."""
        self.config_hash = config_hash
        self.results: list[tuple[Finding, ResolutionOutcome]] = []
        self.start_time = time.time()

    def add_result(self, finding: Finding, outcome: ResolutionOutcome) -> None:
        """Record the outcome of a single finding."""
        self.results.append((finding, outcome))

    @property
    def outcomes(self) -> list[ResolutionOutcome]:
        """Outcomes in processing order."""
        return [outcome for _, outcome in self.results]

    def generate_report(self, path: str | Path) -> None:
        """Write the summary report to a JSON file."""
        report = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "total_findings": len(self.results),
            },
            "results": [_result_entry(f, o) for f, o in self.results],
            "stats": self.compute_stats(),
        }
        Path(path).write_text(json.dumps(report, indent=2), encoding="utf-8")

    def compute_stats(self) -> dict[str, Any]:
        """Count exact, degraded and skipped outcomes, and skips per reason."""
        exact = degraded = skipped = 0
        skip_reasons: dict[str, int] = {}
        for outcome in self.outcomes:
            if isinstance(outcome, Resolved):
                if outcome.exact:
                    exact += 1
                else:
                    degraded += 1
            else:
                skipped += 1
                skip_reasons[outcome.reason] = skip_reasons.get(outcome.reason, 0) + 1
        return {
            "exact": exact,
            "degraded": degraded,
            "skipped": skipped,
            "skip_reasons": skip_reasons,
        }


def _result_entry(finding: Finding, outcome: ResolutionOutcome) -> dict[str, Any]:
    entry: dict[str, Any] = {
        "report_line": finding.report_line,
        "rule": finding.rule_config_key,
        "reported_path": finding.path,
        "reported_file": finding.file,
    }
    if isinstance(outcome, Resolved):
        entry.update(
            {
                "status": "exact" if outcome.exact else "degraded",
                "path": str(outcome.path),
                "line": outcome.line,
            }
        )
    else:
        entry.update(
            {
                "status": "skipped",
                "path": str(outcome.path) if outcome.path else None,
                "reason": outcome.reason,
            }
        )
    return entry
