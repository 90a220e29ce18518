"""Logic for merging a user configuration over the defaults."""

from typing import Any

ADDITIVE_KEYS = frozenset({"generated_suffixes"})


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Nested mappings are merged recursively.
    - Lists in 'update' replace lists in 'base', except for ADDITIVE_KEYS,
      which are unioned so user config can only add generated suffixes.
    """
    result = base.copy()
    for key, value in update.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        elif (
            key in ADDITIVE_KEYS
            and isinstance(current, list)
            and isinstance(value, list)
        ):
            # Keep default order, append new entries
            result[key] = current + [v for v in value if v not in current]
        else:
            result[key] = value
    return result
