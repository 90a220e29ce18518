"""Error kinds that abort a resolution pass."""


class UnmappedRuleKeyError(LookupError):
    """Raised when an enabled rule config key has no matching active rule."""

    def __init__(self, rule_config_key: str, repository_key: str) -> None:
        """Record the key and repository for the error message."""
        self.rule_config_key = rule_config_key
        self.repository_key = repository_key
        super().__init__(
            "Unable to find the rule key corresponding to the rule config key "
            f'"{rule_config_key}" in repository "{repository_key}".'
        )


class FindingsFileError(ValueError):
    """Raised when a findings file is missing or malformed."""
