"""
ListValidator - validates optional array fields.
"""

from typing import Any

from .base_validator import BaseValidator
from .coercion import is_present


class ListValidator(BaseValidator):
    """
    Validates that an optional field, when provided, is a list.

    Parameters:
    - non_empty: Whether a provided list must contain at least one item (default True)
    """

    DEFAULT_MESSAGES = {
        "not_a_list": "{field} must be an array",
        "empty": "At least one {field} is required",
    }

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)
        self.non_empty = self.parameters.get("non_empty", True)

    def validate(self, value: Any, record: dict[str, Any]) -> None:
        if not is_present(value):
            return

        if not isinstance(value, (list, tuple)):
            self.fail("not_a_list")

        if self.non_empty and len(value) == 0:
            self.fail("empty")

    @property
    def rule_type(self) -> str:
        return "list"
