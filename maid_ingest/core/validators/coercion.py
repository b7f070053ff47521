"""
Value coercion helpers shared by validators and the profile sanitizer.
"""

from datetime import date, datetime
from typing import Any


def is_present(value: Any) -> bool:
    """A value counts as provided unless it is None or a blank string."""
    if value is None:
        return False
    if isinstance(value, str) and value.strip() == "":
        return False
    return True


def parse_int(value: Any) -> int:
    """
    Parse an integer from an int, an integral float or a digit string.

    Raises:
        ValueError: If the value is not an integer
    """
    # bool is an int subclass but never a count
    if isinstance(value, bool):
        raise ValueError(f"Cannot parse {value!r} as integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"Cannot parse {value!r} as integer")
        return int(value)
    if isinstance(value, str):
        return int(value.strip())
    raise ValueError(f"Cannot parse {type(value).__name__} as integer")


def parse_float(value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError(f"Cannot parse {value!r} as float")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        return float(value.strip())
    raise ValueError(f"Cannot parse {type(value).__name__} as float")


def parse_date(value: Any) -> date:
    """
    Parse a calendar date from a date, a datetime or an ISO-8601 string.

    Raises:
        ValueError: If the value is not a valid date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            return datetime.fromisoformat(text).date()
    raise ValueError(f"Cannot parse {type(value).__name__} as date")


def parse_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        return datetime.fromisoformat(value.strip())
    raise ValueError(f"Cannot parse {type(value).__name__} as datetime")


def coerce_bool(value: Any) -> bool:
    """
    Coerce a value to bool.

    Strings are matched against true/1/yes and false/0/no so that "false"
    does not become True.

    Raises:
        ValueError: If a string is not a recognised boolean
    """
    if isinstance(value, str):
        if value.strip().lower() in ("true", "1", "yes"):
            return True
        elif value.strip().lower() in ("false", "0", "no", ""):
            return False
        else:
            raise ValueError(f"Cannot parse '{value}' as boolean")
    return bool(value)


def calculate_age(date_of_birth: date, today: date) -> int:
    """Calendar age: whole years, minus one if this year's birthday is still ahead."""
    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age
