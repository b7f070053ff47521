"""
ValidationResult model representing the outcome of validating one profile row (ephemeral).
"""

from typing import List

from pydantic import BaseModel, Field, field_validator

from .profile_record import SanitizedProfileRecord


class ValidationResult(BaseModel):
    """
    Outcome of validating a raw profile row (ephemeral, used during processing).

    Either ``passed`` is True and ``sanitized`` holds the normalized record,
    or ``passed`` is False and ``errors`` lists every violated rule message.

    Attributes:
        passed: Overall validation status
        errors: Human-readable messages, in rule order
        failed_rules: Names of the rules that failed
        sanitized: Normalized record (only when passed)
    """

    passed: bool
    errors: List[str] = Field(default_factory=list)
    failed_rules: List[str] = Field(default_factory=list)
    sanitized: SanitizedProfileRecord | None = None

    @field_validator('errors')
    @classmethod
    def check_passed_consistency(cls, v, info):
        """Validate that passed=True implies errors is empty."""
        if info.data.get('passed') and len(v) > 0:
            raise ValueError("passed=True but errors is not empty")
        return v

    @property
    def error_message(self) -> str:
        """Field errors joined the way row failures report them."""
        return ", ".join(self.errors)

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "passed": False,
                "errors": [
                    "Full name is required",
                    "Maximum salary cannot be less than minimum salary"
                ],
                "failed_rules": [
                    "full_name_required",
                    "salary_order"
                ],
                "sanitized": None
            }
        }
