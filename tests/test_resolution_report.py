"""Tests for the resolution report."""

import json
from pathlib import Path

from fxcop_locator.finding import Finding
from fxcop_locator.resolution_outcome import Resolved, Skipped
from fxcop_locator.resolution_report import ResolutionReport


def test_resolution_report_generation(tmp_path: Path) -> None:
    """Verify that the report is written with results and stats."""
    report = ResolutionReport("hash123")
    f1 = Finding("/src", "A.cs", 3, "m", "CA1", 1)
    f2 = Finding(None, "B.g.cs", None, "m", "CA1", 2)
    f3 = Finding(None, None, None, "m", "CA2", 3)

    report.add_result(f1, Resolved("h", Path("/src/A.cs"), 3, "m", exact=True))
    report.add_result(f2, Skipped("generated/excluded file, not tracked"))
    report.add_result(f3, Skipped("no file reference"))

    output_file = tmp_path / "report.json"
    report.generate_report(output_file)

    content = json.loads(output_file.read_text(encoding="utf-8"))
    assert content["meta"]["config_hash"] == "hash123"
    assert content["meta"]["total_findings"] == 3  # noqa: PLR2004

    first, second, _ = content["results"]
    assert first["status"] == "exact"
    assert first["path"] == str(Path("/src/A.cs"))
    assert first["line"] == 3  # noqa: PLR2004
    assert second["status"] == "skipped"
    assert second["path"] is None
    assert second["reason"] == "generated/excluded file, not tracked"

    stats = content["stats"]
    assert stats["exact"] == 1
    assert stats["degraded"] == 0
    assert stats["skipped"] == 2  # noqa: PLR2004
    assert stats["skip_reasons"] == {
        "generated/excluded file, not tracked": 1,
        "no file reference": 1,
    }
