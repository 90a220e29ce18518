"""Immutable view of the configuration consumed by the resolution policy."""

import hashlib
import json
from dataclasses import dataclass, replace
from typing import Any

from fxcop_locator.load_config import DEFAULT_CONFIG


@dataclass(frozen=True)
class LocatorConfig:
    """Settings that drive file resolution for one analysis pass."""

    language_key: str
    repository_key: str
    source_suffix: str
    manifest_file: str
    generated_suffixes: tuple[str, ...]
    uncertainty_annotation: str
    config_hash: str = ""

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> "LocatorConfig":
        """Freeze a merged configuration dictionary."""
        return cls(
            language_key=str(config["language_key"]),
            repository_key=str(config["repository_key"]),
            source_suffix=str(config["source_suffix"]),
            manifest_file=str(config["manifest_file"]),
            generated_suffixes=tuple(str(s) for s in config["generated_suffixes"]),
            uncertainty_annotation=str(config["uncertainty_annotation"]),
            config_hash=compute_config_hash(config),
        )

    @classmethod
    def default(cls) -> "LocatorConfig":
        """Return the configuration built from DEFAULT_CONFIG."""
        return cls.from_dict(DEFAULT_CONFIG)

    def with_language(self, language_key: str) -> "LocatorConfig":
        """Return a copy targeting another language."""
        return replace(self, language_key=language_key)

    def is_generated(self, name: str) -> bool:
        """Return True if the file name marks generated or designer code."""
        return name.endswith(self.generated_suffixes)


def compute_config_hash(config: dict[str, Any]) -> str:
    """Fingerprint the merged configuration for the resolution report.

    Key order does not matter, so equal settings always tag reports alike.
    """
    config_json = json.dumps(config, sort_keys=True, ensure_ascii=True)
    return hashlib.sha256(config_json.encode("utf-8")).hexdigest()
