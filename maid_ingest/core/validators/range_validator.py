"""
RangeValidator - validates integer fields are within a specified range.
"""

from typing import Any

from .base_validator import BaseValidator
from .coercion import parse_int


class RangeValidator(BaseValidator):
    """
    Validates that an optional field parses as an integer within a range.

    Parameters:
    - min: Minimum value (inclusive)
    - max: Maximum value (inclusive)

    Values that cannot be parsed and values outside the range report the same
    message, e.g. "Experience years must be between 0 and 50".
    """

    DEFAULT_MESSAGES = {"out_of_range": "{field} must be between {min} and {max}"}

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)

        self.min_value = self.parameters.get("min")
        self.max_value = self.parameters.get("max")

        if self.min_value is None and self.max_value is None:
            raise ValueError("RangeValidator requires at least one of: min, max")

    def validate(self, value: Any, record: dict[str, Any]) -> None:
        """
        Validate that the value is an integer within the specified range.

        Raises:
            ValidationError: If value is not an integer or is outside the range
        """
        # Absent values are allowed; blank strings are not
        if value is None:
            return

        try:
            number = parse_int(value)
        except (ValueError, TypeError):
            self.fail("out_of_range", min=self.min_value, max=self.max_value)

        if self.min_value is not None and number < self.min_value:
            self.fail("out_of_range", min=self.min_value, max=self.max_value)

        if self.max_value is not None and number > self.max_value:
            self.fail("out_of_range", min=self.min_value, max=self.max_value)

    @property
    def rule_type(self) -> str:
        return "range"
