"""
ChoiceValidator - validates enum-like fields against a fixed set of values.
"""

from typing import Any

from .base_validator import BaseValidator
from .coercion import is_present


class ChoiceValidator(BaseValidator):
    """
    Validates that an optional field is one of the allowed values.

    Parameters:
    - choices: Allowed values, in the order they are listed in messages
    """

    DEFAULT_MESSAGES = {"invalid_choice": "Invalid {field}. Must be one of: {choices}"}

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)

        self.choices = tuple(self.parameters.get("choices", ()))
        if not self.choices:
            raise ValueError("ChoiceValidator requires 'choices' parameter")

    def validate(self, value: Any, record: dict[str, Any]) -> None:
        if not is_present(value):
            return

        if value not in self.choices:
            self.fail("invalid_choice", choices=", ".join(self.choices))

    @property
    def rule_type(self) -> str:
        return "choice"
