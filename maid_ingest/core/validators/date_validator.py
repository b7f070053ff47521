"""
DateValidator - validates date fields, with optional age and expiry checks.
"""

from datetime import date
from typing import Any, Callable

from .base_validator import BaseValidator
from .coercion import calculate_age, is_present, parse_date


class DateValidator(BaseValidator):
    """
    Validates that an optional field parses as a calendar date.

    Parameters:
    - today: Callable returning the reference date (defaults to date.today)
    - min_age / max_age: Inclusive calendar-age bounds, for birth dates
    - not_in_past: Reject dates before today, for expiry dates

    Only one failure is reported per value: an unparseable date is not
    checked further.
    """

    DEFAULT_MESSAGES = {
        "invalid": "Invalid {field} format",
        "too_young": "{field} must be at least {min_age} years ago",
        "too_old": "{field} must be at most {max_age} years ago",
        "in_past": "{field} is in the past",
    }

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)
        self.today: Callable[[], date] = self.parameters.get("today", date.today)
        self.min_age = self.parameters.get("min_age")
        self.max_age = self.parameters.get("max_age")
        self.not_in_past = self.parameters.get("not_in_past", False)

    def validate(self, value: Any, record: dict[str, Any]) -> None:
        if not is_present(value):
            return

        try:
            parsed = parse_date(value)
        except (ValueError, TypeError):
            self.fail("invalid")

        today = self.today()

        if self.min_age is not None or self.max_age is not None:
            age = calculate_age(parsed, today)
            if self.min_age is not None and age < self.min_age:
                self.fail("too_young", min_age=self.min_age, max_age=self.max_age)
            if self.max_age is not None and age > self.max_age:
                self.fail("too_old", min_age=self.min_age, max_age=self.max_age)

        if self.not_in_past and parsed < today:
            self.fail("in_past")

    @property
    def rule_type(self) -> str:
        return "date"
