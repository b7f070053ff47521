"""
Normalization of a validated raw row into a SanitizedProfileRecord.

Only called after every profile rule passed, so required fields are
known to be present and validated fields are known to parse.
"""

from typing import Any, Callable, Mapping

from maid_ingest.config import IngestSettings
from maid_ingest.core.models import SanitizedProfileRecord
from maid_ingest.core.validators.coercion import (
    coerce_bool,
    is_present,
    parse_date,
    parse_datetime,
    parse_float,
    parse_int,
)


def _text(value: Any) -> str | None:
    if not is_present(value):
        return None
    return value.strip() if isinstance(value, str) else str(value)


def _list(value: Any) -> list[Any]:
    return list(value) if isinstance(value, (list, tuple)) else []


def _parsed(parser: Callable[[Any], Any], value: Any, default: Any) -> Any:
    """Parse a system-managed field, falling back to its default when unusable."""
    if not is_present(value):
        return default
    try:
        return parser(value)
    except (ValueError, TypeError):
        return default


def _flag(value: Any, default: bool) -> bool:
    if value is None:
        return default
    try:
        return coerce_bool(value)
    except ValueError:
        return bool(value)


def sanitize_profile(raw: Mapping[str, Any], settings: IngestSettings) -> SanitizedProfileRecord:
    """
    Build the fully-defaulted record for a row that passed validation.

    Args:
        raw: The validated raw row (camelCase keys)
        settings: Supplies nationality and currency defaults

    Returns:
        SanitizedProfileRecord with every field populated
    """
    return SanitizedProfileRecord(
        full_name=raw["fullName"].strip(),
        date_of_birth=parse_date(raw["dateOfBirth"]),
        nationality=_text(raw.get("nationality")) or settings.default_nationality,
        current_location=_text(raw.get("currentLocation")),
        marital_status=_text(raw.get("maritalStatus")),
        children_count=_parsed(parse_int, raw.get("childrenCount"), 0),

        phone=_text(raw.get("phone")),
        email=_text(raw.get("email")),
        profile_photo=_text(raw.get("profilePhoto")),

        experience_years=_parsed(parse_int, raw.get("experienceYears"), 0),
        previous_countries=_list(raw.get("previousCountries")),
        skills=_list(raw.get("skills")),
        languages=_list(raw.get("languages")),
        education_level=_text(raw.get("educationLevel")),
        work_experience=_list(raw.get("workExperience")),

        preferred_salary_min=_parsed(parse_int, raw.get("preferredSalaryMin"), None),
        preferred_salary_max=_parsed(parse_int, raw.get("preferredSalaryMax"), None),
        preferred_currency=_text(raw.get("preferredCurrency")) or settings.default_currency,
        available_from=_parsed(parse_date, raw.get("availableFrom"), None),
        contract_duration_preference=_text(raw.get("contractDurationPreference")),
        live_in_preference=_flag(raw.get("liveInPreference"), True),
        preferred_countries=_list(raw.get("preferredCountries")),

        passport_number=_text(raw.get("passportNumber")),
        passport_expiry=_parsed(parse_date, raw.get("passportExpiry"), None),
        visa_status=_text(raw.get("visaStatus")),
        medical_certificate_valid=_flag(raw.get("medicalCertificateValid"), False),
        police_clearance_valid=_flag(raw.get("policeClearanceValid"), False),
        passport=raw.get("passport") or None,
        medical_certificate=raw.get("medicalCertificate") or None,
        police_clearance=raw.get("policeClearance") or None,

        availability_status=_text(raw.get("availabilityStatus")) or "available",
        verification_status=_text(raw.get("verificationStatus")) or "pending",
        profile_completion_percentage=_parsed(parse_int, raw.get("profileCompletionPercentage"), 0),
        completion_percentage=_parsed(parse_int, raw.get("completionPercentage"), 0),
        profile_views=_parsed(parse_int, raw.get("profileViews"), 0),
        total_applications=_parsed(parse_int, raw.get("totalApplications"), 0),
        successful_placements=_parsed(parse_int, raw.get("successfulPlacements"), 0),
        average_rating=_parsed(parse_float, raw.get("averageRating"), 0.0),
        status=_text(raw.get("status")) or "draft",
        is_verified=_flag(raw.get("isVerified"), False),
        verified_at=_parsed(parse_datetime, raw.get("verifiedAt"), None),

        agency_approved=_flag(raw.get("agencyApproved"), False),
    )
