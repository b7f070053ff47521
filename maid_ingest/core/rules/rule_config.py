"""
Rule configuration management.

Provides a fluent builder for the rule dictionaries consumed by
ProfileValidator.
"""

from typing import Any, Callable, Iterable


class RuleConfigBuilder:
    """
    Programmatically build rule configurations.

    Each ``add_*`` method appends one rule dictionary:
    ``{rule_name, rule_type, field_name, parameters, enabled}``.
    """

    def __init__(self):
        """Initialize empty rule configuration."""
        self.rules: list[dict[str, Any]] = []

    def _add(
        self,
        rule_name: str,
        rule_type: str,
        field_name: str,
        parameters: dict[str, Any],
        enabled: bool = True,
    ) -> "RuleConfigBuilder":
        self.rules.append({
            "rule_name": rule_name,
            "rule_type": rule_type,
            "field_name": field_name,
            "parameters": parameters,
            "enabled": enabled,
        })
        return self

    def add_required_field(
        self,
        field_name: str,
        message: str | None = None,
        require_string: bool = False,
        rule_name: str | None = None,
    ) -> "RuleConfigBuilder":
        """Add a required field rule."""
        params: dict[str, Any] = {"require_string": require_string}
        if message:
            params["messages"] = {"missing": message}
        return self._add(rule_name or f"{field_name}_required", "required_field", field_name, params)

    def add_regex(
        self,
        field_name: str,
        pattern: str,
        message: str | None = None,
        rule_name: str | None = None,
        flags: int = 0,
    ) -> "RuleConfigBuilder":
        """Add a regex validation rule."""
        params: dict[str, Any] = {"pattern": pattern}
        if flags:
            params["flags"] = flags
        if message:
            params["messages"] = {"mismatch": message}
        return self._add(rule_name or f"{field_name}_regex", "regex", field_name, params)

    def add_range(
        self,
        field_name: str,
        min_value: int | None = None,
        max_value: int | None = None,
        message: str | None = None,
        rule_name: str | None = None,
    ) -> "RuleConfigBuilder":
        """Add an integer range validation rule."""
        params: dict[str, Any] = {}
        if min_value is not None:
            params["min"] = min_value
        if max_value is not None:
            params["max"] = max_value
        if message:
            params["messages"] = {"out_of_range": message}
        return self._add(rule_name or f"{field_name}_range", "range", field_name, params)

    def add_choice(
        self,
        field_name: str,
        choices: Iterable[str],
        message: str | None = None,
        rule_name: str | None = None,
    ) -> "RuleConfigBuilder":
        """Add an allowed-values rule."""
        params: dict[str, Any] = {"choices": list(choices)}
        if message:
            params["messages"] = {"invalid_choice": message}
        return self._add(rule_name or f"{field_name}_choice", "choice", field_name, params)

    def add_date(
        self,
        field_name: str,
        messages: dict[str, str] | None = None,
        rule_name: str | None = None,
        **options: Any,
    ) -> "RuleConfigBuilder":
        """Add a date rule; options are today, min_age, max_age, not_in_past."""
        params: dict[str, Any] = dict(options)
        if messages:
            params["messages"] = messages
        return self._add(rule_name or f"{field_name}_date", "date", field_name, params)

    def add_list(
        self,
        field_name: str,
        messages: dict[str, str] | None = None,
        non_empty: bool = True,
        rule_name: str | None = None,
    ) -> "RuleConfigBuilder":
        """Add an array rule."""
        params: dict[str, Any] = {"non_empty": non_empty}
        if messages:
            params["messages"] = messages
        return self._add(rule_name or f"{field_name}_list", "list", field_name, params)

    def add_custom(
        self,
        field_name: str,
        validator_func: Callable[[Any, dict[str, Any]], None],
        error_message: str | None = None,
        rule_name: str | None = None,
    ) -> "RuleConfigBuilder":
        """Add a custom rule backed by a callable."""
        params: dict[str, Any] = {"validator_func": validator_func}
        if error_message:
            params["error_message"] = error_message
        return self._add(rule_name or f"{field_name}_custom", "custom", field_name, params)

    def build(self) -> list[dict[str, Any]]:
        """Build and return the rule configuration."""
        return self.rules
