"""
SanitizedProfileRecord model representing a validated, fully-defaulted maid profile.
"""

from datetime import date, datetime
from typing import Any, Literal

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

MaritalStatus = Literal["single", "married", "divorced", "widowed"]
AvailabilityStatus = Literal["available", "busy", "hired", "inactive"]
VerificationStatus = Literal["pending", "verified", "rejected"]


class SanitizedProfileRecord(BaseModel):
    """
    A maid profile that passed validation and is ready for persistence.

    Attributes are snake_case; ``model_dump(by_alias=True)`` produces the
    camelCase shape used by raw input rows and the persistence layer.

    Attributes:
        full_name: Trimmed full name
        date_of_birth: Parsed date of birth
        nationality: ISO country code (defaults to "ET")
        skills, languages: Non-empty when provided, [] otherwise
        preferred_salary_min / preferred_salary_max: Parsed integers or None
        availability_status: "available", "busy", "hired", "inactive"
        verification_status: "pending", "verified", "rejected"
        agency_id: Owning agency (set by the batch, never by the row)
        agency_approved: True for agency-submitted rows
        status: Profile lifecycle status (defaults to "draft")
    """

    # Personal information
    full_name: str = Field(..., min_length=1)
    date_of_birth: date
    nationality: str = "ET"
    current_location: str | None = None
    marital_status: MaritalStatus | None = None
    children_count: int = Field(0, ge=0)

    # Contact information
    phone: str | None = None
    email: str | None = None
    profile_photo: str | None = None

    # Professional information
    experience_years: int = Field(0, ge=0)
    previous_countries: list[Any] = Field(default_factory=list)
    skills: list[Any] = Field(default_factory=list)
    languages: list[Any] = Field(default_factory=list)
    education_level: str | None = None
    work_experience: list[Any] = Field(default_factory=list)

    # Work preferences
    preferred_salary_min: int | None = None
    preferred_salary_max: int | None = None
    preferred_currency: str = "USD"
    available_from: date | None = None
    contract_duration_preference: str | None = None
    live_in_preference: bool = True
    preferred_countries: list[Any] = Field(default_factory=list)

    # Documents and verification
    passport_number: str | None = None
    passport_expiry: date | None = None
    visa_status: str | None = None
    medical_certificate_valid: bool = False
    police_clearance_valid: bool = False
    passport: Any = None
    medical_certificate: Any = None
    police_clearance: Any = None

    # Profile status and counters
    availability_status: AvailabilityStatus = "available"
    verification_status: VerificationStatus = "pending"
    profile_completion_percentage: int = 0
    completion_percentage: int = 0
    profile_views: int = 0
    total_applications: int = 0
    successful_placements: int = 0
    average_rating: float = 0.0
    status: str = "draft"
    is_verified: bool = False
    verified_at: datetime | None = None

    # Agency relationship
    agency_id: str | None = None
    agency_approved: bool = False

    class Config:
        frozen = True
        populate_by_name = True
        alias_generator = to_camel
        json_schema_extra = {
            "example": {
                "fullName": "Tigist Alemu",
                "dateOfBirth": "1995-04-12",
                "nationality": "ET",
                "phone": "+251 911 234 567",
                "skills": ["cooking", "childcare"],
                "languages": ["amharic", "english"],
                "experienceYears": 4,
                "preferredSalaryMin": 400,
                "preferredSalaryMax": 600,
                "availabilityStatus": "available",
                "verificationStatus": "pending",
                "status": "draft",
                "agencyId": "agency-42",
                "agencyApproved": True
            }
        }
