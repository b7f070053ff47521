"""
RegexValidator - validates optional string fields against a regular expression.
"""

import re
from re import Pattern
from typing import Any

from .base_validator import BaseValidator
from .coercion import is_present


class RegexValidator(BaseValidator):
    """
    Validates that a field value, when provided, is a string matching a pattern.

    Parameters:
    - pattern: Regular expression pattern (string or compiled Pattern)
    - flags: Optional regex flags (e.g., re.IGNORECASE)
    """

    DEFAULT_MESSAGES = {"mismatch": "Invalid {field} format"}

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)

        pattern = self.parameters.get("pattern")
        if not pattern:
            raise ValueError("RegexValidator requires 'pattern' parameter")

        flags = self.parameters.get("flags", 0)

        try:
            if isinstance(pattern, str):
                self.pattern: Pattern = re.compile(pattern, flags)
            elif isinstance(pattern, Pattern):
                self.pattern = pattern
            else:
                raise ValueError(f"Pattern must be string or compiled Pattern, got {type(pattern)}")
        except re.error as e:
            raise ValueError(f"Invalid regex pattern: {e}")

    def validate(self, value: Any, record: dict[str, Any]) -> None:
        """
        Validate that the value matches the regex pattern.

        Raises:
            ValidationError: If value is not a string or doesn't match the pattern
        """
        if not is_present(value):
            return

        # fullmatch: "$" alone would accept a trailing newline
        if not isinstance(value, str) or not self.pattern.fullmatch(value):
            self.fail("mismatch", value=value)

    @property
    def rule_type(self) -> str:
        return "regex"
