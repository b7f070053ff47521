"""
Base validator interface for all profile field rules.

All validators must inherit from BaseValidator and implement the validate() method.
"""

from abc import ABC, abstractmethod
from typing import Any


class ValidationError(Exception):
    """Raised when a validation rule fails."""

    def __init__(self, rule_name: str, field_name: str, message: str):
        self.rule_name = rule_name
        self.field_name = field_name
        self.message = message
        super().__init__(f"[{rule_name}] {field_name}: {message}")


class BaseValidator(ABC):
    """
    Abstract base class for all validators.

    Each validator implements a specific rule type (required_field, regex,
    range, choice, date, list, custom). Failure messages are looked up in
    ``DEFAULT_MESSAGES`` and may be overridden through the ``messages``
    parameter so each rule reports the exact text users see.
    """

    DEFAULT_MESSAGES: dict[str, str] = {}

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        """
        Initialize validator.

        Args:
            field_name: Name of the field to validate
            parameters: Rule-specific parameters (e.g., min/max for range)
        """
        self.field_name = field_name
        self.parameters = parameters or {}
        self.messages = {**self.DEFAULT_MESSAGES, **self.parameters.get("messages", {})}

    @abstractmethod
    def validate(self, value: Any, record: dict[str, Any]) -> None:
        """
        Validate a value against this rule.

        Args:
            value: The field value to validate
            record: The entire record (for context-dependent validation)

        Raises:
            ValidationError: If validation fails
        """
        pass

    @property
    @abstractmethod
    def rule_type(self) -> str:
        """Return the rule type identifier."""
        pass

    def fail(self, key: str, **context: Any) -> None:
        """Raise ValidationError with the message registered under ``key``."""
        template = self.messages.get(key, f"{self.field_name} is invalid")
        raise ValidationError(
            rule_name=self.rule_type,
            field_name=self.field_name,
            message=template.format(field=self.field_name, **context),
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(field={self.field_name}, params={self.parameters})"
