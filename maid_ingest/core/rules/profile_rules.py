"""
The rule set applied to every uploaded maid profile row.

Field names are the camelCase keys of raw rows. Messages are the exact
texts reported back to the uploading agency.
"""

import re
from datetime import date
from typing import Any, Callable

from maid_ingest.config import IngestSettings
from maid_ingest.core.validators.coercion import is_present, parse_int

from .rule_config import RuleConfigBuilder

PHONE_PATTERN = r"^[+]?[\d\s\-()]+$"
EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"

MARITAL_STATUSES = ("single", "married", "divorced", "widowed")
AVAILABILITY_STATUSES = ("available", "busy", "hired", "inactive")
VERIFICATION_STATUSES = ("pending", "verified", "rejected")


def check_salary_order(value: Any, record: dict[str, Any]) -> None:
    """Reject a maximum salary below the minimum when both parse."""
    minimum = record.get("preferredSalaryMin")
    if value is None or not is_present(minimum):
        return

    try:
        salary_max = parse_int(value)
        salary_min = parse_int(minimum)
    except (ValueError, TypeError):
        # unparseable values are reported by the range rules
        return

    if salary_max < salary_min:
        raise ValueError("Maximum salary cannot be less than minimum salary")


def build_profile_rules(
    settings: IngestSettings,
    today: Callable[[], date] = date.today,
) -> list[dict[str, Any]]:
    """
    Build the ordered profile rule list.

    Args:
        settings: Supplies the age bounds
        today: Reference date for age and expiry checks

    Returns:
        Rule dictionaries suitable for ProfileValidator
    """
    return (
        RuleConfigBuilder()
        .add_required_field("fullName", "Full name is required", require_string=True)
        .add_required_field("dateOfBirth", "Date of birth is required")
        .add_date(
            "dateOfBirth",
            messages={
                "invalid": "Invalid date of birth format",
                "too_young": "Maid must be at least {min_age} years old",
                "too_old": "Invalid age (maximum {max_age} years)",
            },
            rule_name="dateOfBirth_age",
            today=today,
            min_age=settings.min_age,
            max_age=settings.max_age,
        )
        .add_regex("phone", PHONE_PATTERN, "Invalid phone number format", flags=re.ASCII)
        .add_regex("email", EMAIL_PATTERN, "Invalid email format")
        .add_list("skills", {
            "not_a_list": "Skills must be an array",
            "empty": "At least one skill is required",
        })
        .add_list("languages", {
            "not_a_list": "Languages must be an array",
            "empty": "At least one language is required",
        })
        .add_choice(
            "maritalStatus",
            MARITAL_STATUSES,
            "Invalid marital status. Must be one of: {choices}",
        )
        .add_range("experienceYears", 0, 50, "Experience years must be between 0 and 50")
        .add_range("childrenCount", 0, 20, "Children count must be between 0 and 20")
        .add_range(
            "preferredSalaryMin",
            min_value=0,
            message="Preferred minimum salary must be a positive number",
        )
        .add_range(
            "preferredSalaryMax",
            min_value=0,
            message="Preferred maximum salary must be a positive number",
        )
        .add_custom("preferredSalaryMax", check_salary_order, rule_name="salary_order")
        .add_date(
            "passportExpiry",
            messages={
                "invalid": "Invalid passport expiry date format",
                "in_past": "Passport has expired",
            },
            today=today,
            not_in_past=True,
        )
        .add_date("availableFrom", messages={"invalid": "Invalid available from date format"})
        .add_choice(
            "availabilityStatus",
            AVAILABILITY_STATUSES,
            "Invalid availability status. Must be one of: {choices}",
        )
        .add_choice(
            "verificationStatus",
            VERIFICATION_STATUSES,
            "Invalid verification status. Must be one of: {choices}",
        )
        .build()
    )
