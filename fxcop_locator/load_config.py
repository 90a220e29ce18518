"""Logic for loading the locator configuration from YAML."""

import copy
from pathlib import Path
from typing import Any

import yaml

from fxcop_locator.deep_merge import deep_merge

UNCERTAINTY_ANNOTATION = (
    " {File name may not be correct. "
    "Search file based on class/assembly name appearing in this message}."
)

DEFAULT_CONFIG: dict[str, Any] = {
    "language_key": "cs",
    "repository_key": "fxcop",
    "source_suffix": ".cs",
    "manifest_file": "AssemblyInfo.cs",
    "generated_suffixes": [".g.cs", ".g.i.cs", ".Designer.cs", ".xaml"],
    "uncertainty_annotation": UNCERTAINTY_ANNOTATION,
    "language_extensions": {
        "cs": [".cs"],
    },
    "rules": {
        "custom_rule_key": "CustomRuleTemplate",
        "check_id_parameter": "CheckId",
        "active": [],
    },
}


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
