"""
Validation rule implementations.

Provides validators for required fields, regex patterns, integer ranges,
enumerations, dates, arrays and custom cross-field logic.
"""

from .base_validator import BaseValidator, ValidationError
from .choice_validator import ChoiceValidator
from .custom_validator import CustomValidator
from .date_validator import DateValidator
from .list_validator import ListValidator
from .range_validator import RangeValidator
from .regex_validator import RegexValidator
from .required_field_validator import RequiredFieldValidator

__all__ = [
    "BaseValidator",
    "ValidationError",
    "RequiredFieldValidator",
    "RegexValidator",
    "RangeValidator",
    "ChoiceValidator",
    "DateValidator",
    "ListValidator",
    "CustomValidator",
]
