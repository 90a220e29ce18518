"""Registration of resolved findings as issues on the host."""

import logging
from typing import Any

from fxcop_locator.registry import Registry
from fxcop_locator.rule_profile import RuleProfile

logger = logging.getLogger(__name__)


class IssueEmitter:
    """Turns a resolved (file, line, message) into a host issue."""

    def __init__(self, registry: Registry, profile: RuleProfile) -> None:
        """Initialize the emitter with the host registry and rule profile."""
        self.registry = registry
        self.profile = profile

    def emit(self, handle: Any, rule_config_key: str, line: int, message: str) -> None:
        """Attach an issue to the handle's file.

        Raises UnmappedRuleKeyError when the config key has no active rule.
        """
        rule_key = self.profile.rule_key(rule_config_key)
        logger.debug("Adding issue %s at line %d", rule_key, line)
        self.registry.add_issue(handle, rule_key, line, message)
