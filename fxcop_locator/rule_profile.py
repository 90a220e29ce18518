"""The set of active FxCop rules and the mapping from config keys to rule keys."""

from dataclasses import dataclass, field
from typing import Any

from fxcop_locator.errors import UnmappedRuleKeyError
from fxcop_locator.rule_key import RuleKey

CUSTOM_RULE_KEY = "CustomRuleTemplate"
CHECK_ID_PARAMETER = "CheckId"


@dataclass(frozen=True)
class ActiveRule:
    """A rule enabled in the quality profile."""

    rule_key: str
    config_key: str | None = None
    parameters: dict[str, str] = field(default_factory=dict)

    def parameter(self, name: str) -> str | None:
        """Return a rule parameter value, if set."""
        return self.parameters.get(name)


class RuleProfile:
    """Active rules of one rule repository."""

    def __init__(
        self,
        repository_key: str,
        active_rules: list[ActiveRule],
        custom_rule_key: str = CUSTOM_RULE_KEY,
        check_id_parameter: str = CHECK_ID_PARAMETER,
    ) -> None:
        """Initialize the profile for a repository."""
        self.repository_key = repository_key
        self.active_rules = list(active_rules)
        self.custom_rule_key = custom_rule_key
        self.check_id_parameter = check_id_parameter

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "RuleProfile":
        """Build the profile from the 'rules' section of the configuration."""
        rules_cfg = config.get("rules", {})
        active = [
            ActiveRule(
                rule_key=str(r["rule_key"]),
                config_key=str(r["config_key"]) if r.get("config_key") else None,
                parameters={
                    str(k): str(v) for k, v in (r.get("parameters") or {}).items()
                },
            )
            for r in rules_cfg.get("active") or []
        ]
        return cls(
            str(config["repository_key"]),
            active,
            custom_rule_key=rules_cfg.get("custom_rule_key", CUSTOM_RULE_KEY),
            check_id_parameter=rules_cfg.get("check_id_parameter", CHECK_ID_PARAMETER),
        )

    @property
    def is_empty(self) -> bool:
        """Return True when no rule of the repository is active."""
        return not self.active_rules

    def enabled_rule_config_keys(self) -> list[str]:
        """Return the config keys FxCop must run, excluding the custom template."""
        keys = []
        for rule in self.active_rules:
            if rule.rule_key == self.custom_rule_key:
                continue
            key = rule.config_key or rule.parameter(self.check_id_parameter)
            if key:
                keys.append(key)
        return keys

    def rule_key(self, rule_config_key: str) -> RuleKey:
        """Return the rule identity for a config key.

        Custom rules created from the template carry their FxCop check id in
        a parameter instead of a config key.
        """
        for rule in self.active_rules:
            if rule_config_key in (
                rule.config_key,
                rule.parameter(self.check_id_parameter),
            ):
                return RuleKey(self.repository_key, rule.rule_key)
        raise UnmappedRuleKeyError(rule_config_key, self.repository_key)
