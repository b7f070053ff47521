"""
RequiredFieldValidator - ensures a field is present and not null/empty.
"""

from typing import Any, Dict
from .base_validator import BaseValidator


class RequiredFieldValidator(BaseValidator):
    """
    Validates that a required field is present and not null/empty.

    Fails if:
    - Field is missing from the record
    - Field value is None
    - Field value is an empty or whitespace-only string
    - Field value is not a string (when ``require_string`` is set)
    """

    DEFAULT_MESSAGES = {"missing": "{field} is required"}

    def __init__(self, field_name: str, parameters: Dict[str, Any] | None = None):
        super().__init__(field_name, parameters)
        self.require_string = self.parameters.get("require_string", False)

    def validate(self, value: Any, record: Dict[str, Any]) -> None:
        """
        Validate that the field is present and not null/empty.

        Args:
            value: The field value to validate
            record: The entire record

        Raises:
            ValidationError: If field is missing, None, empty or of the wrong type
        """
        if self.field_name not in record or value is None:
            self.fail("missing")

        if self.require_string and not isinstance(value, str):
            self.fail("missing")

        if isinstance(value, str) and value.strip() == "":
            self.fail("missing")

    @property
    def rule_type(self) -> str:
        return "required_field"
