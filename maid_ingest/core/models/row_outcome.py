"""
RowOutcome model representing the result of processing one batch row.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

from .profile_record import SanitizedProfileRecord

RowStatus = Literal["created", "validated", "failed"]
ErrorKind = Literal["validation", "persistence", "cancelled"]


class RowOutcome(BaseModel):
    """
    Tagged, immutable result for one row of a batch.

    Attributes:
        status: "created", "validated" (dry run) or "failed"
        row_number: 1-indexed position of the row in the submitted batch
        sanitized: Normalized record (validated rows)
        created_id: Identifier returned by the repository (created rows)
        full_name: Name of the created profile (created rows)
        raw_input: Original row exactly as submitted (failed rows)
        error_message: Human-readable failure reason (failed rows)
        error_kind: "validation", "persistence" or "cancelled" (failed rows)
    """

    status: RowStatus
    row_number: int = Field(..., ge=1)
    sanitized: SanitizedProfileRecord | None = None
    created_id: str | None = None
    full_name: str | None = None
    raw_input: Any = None
    error_message: str | None = None
    error_kind: ErrorKind | None = None

    @model_validator(mode="after")
    def check_status_payload(self):
        """Validate that each status carries the fields it promises."""
        if self.status == "failed" and (not self.error_message or self.error_kind is None):
            raise ValueError("failed outcome requires error_message and error_kind")
        if self.status == "validated" and self.sanitized is None:
            raise ValueError("validated outcome requires sanitized record")
        if self.status == "created" and not self.created_id:
            raise ValueError("created outcome requires created_id")
        return self

    @property
    def succeeded(self) -> bool:
        return self.status != "failed"

    @classmethod
    def validated(cls, row_number: int, sanitized: SanitizedProfileRecord) -> "RowOutcome":
        return cls(status="validated", row_number=row_number, sanitized=sanitized)

    @classmethod
    def created(cls, row_number: int, created_id: str, full_name: str) -> "RowOutcome":
        return cls(status="created", row_number=row_number, created_id=created_id, full_name=full_name)

    @classmethod
    def failure(
        cls,
        row_number: int,
        raw_input: Any,
        error_message: str,
        error_kind: ErrorKind,
    ) -> "RowOutcome":
        return cls(
            status="failed",
            row_number=row_number,
            raw_input=raw_input,
            error_message=error_message,
            error_kind=error_kind,
        )

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "status": "failed",
                "row_number": 2,
                "raw_input": {"dateOfBirth": "1990-01-01"},
                "error_message": "Row 2 validation errors: Full name is required",
                "error_kind": "validation"
            }
        }
