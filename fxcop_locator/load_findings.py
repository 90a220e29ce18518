"""Logic for loading already-parsed FxCop findings from a YAML or JSON file."""

from pathlib import Path
from typing import Any

import yaml

from fxcop_locator.errors import FindingsFileError
from fxcop_locator.finding import Finding


def load_findings(path: Path | str) -> list[Finding]:
    """Load findings records, in file order.

    Each record is a mapping with 'message', 'rule' (or 'rule_config_key')
    and optional 'path', 'file', 'line' and 'report_line'. JSON is accepted
    since it is valid YAML.
    """
    p = Path(path)
    if not p.is_file():
        msg = f"Findings file not found: {p}"
        raise FindingsFileError(msg)
    try:
        doc = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        msg = f"Malformed findings file {p}: {e}"
        raise FindingsFileError(msg) from e

    if isinstance(doc, dict):
        doc = doc.get("findings")
    if doc is None:
        return []
    if not isinstance(doc, list):
        msg = f"Expected a list of findings in {p}"
        raise FindingsFileError(msg)
    return [_to_finding(rec, i) for i, rec in enumerate(doc, start=1)]


def _to_finding(rec: Any, index: int) -> Finding:
    if not isinstance(rec, dict):
        msg = f"Finding #{index} is not a mapping"
        raise FindingsFileError(msg)
    rule = rec.get("rule_config_key", rec.get("rule"))
    if not rule:
        msg = f"Finding #{index} has no rule"
        raise FindingsFileError(msg)
    return Finding(
        path=_opt_str(rec.get("path")),
        file=_opt_str(rec.get("file")),
        line=_opt_int(rec.get("line")),
        message=str(rec.get("message") or ""),
        rule_config_key=str(rule),
        report_line=_opt_int(rec.get("report_line")) or index,
    )


def _opt_str(v: object) -> str | None:
    if v is None:
        return None
    s = str(v).strip()
    return s or None


def _opt_int(v: object) -> int | None:
    """Return v as an int, or None when it is missing or not a number."""
    if v is None or isinstance(v, bool):
        return None
    try:
        return int(str(v).strip())
    except ValueError:
        return None
