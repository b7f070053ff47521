"""
AuditEntry and DomainEvent models emitted after a batch completes.
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AuditEntry(BaseModel):
    """
    One audit trail record describing a whole bulk upload.

    Attributes:
        log_id: Assigned by the audit store, if any
        action: "bulk_upload_validated", "bulk_upload_completed" or "bulk_upload_failed"
        user_id: User who submitted the batch
        agency_id: Agency the batch belongs to
        resource_id: Optional affected resource
        metadata: Counts block ({totalAttempted, succeeded, failed, failureRate})
        error: Failure reason for "bulk_upload_failed"
        timestamp: When the entry was produced
    """

    log_id: int | None = None
    action: str = Field(..., min_length=1)
    user_id: str
    agency_id: str
    resource_id: str | None = None
    metadata: dict[str, Any] | None = None
    error: str | None = None
    timestamp: datetime = Field(default_factory=utc_now)

    class Config:
        json_schema_extra = {
            "example": {
                "action": "bulk_upload_completed",
                "user_id": "user-7",
                "agency_id": "agency-42",
                "metadata": {
                    "totalAttempted": 3,
                    "succeeded": 1,
                    "failed": 2,
                    "failureRate": "66.67%"
                }
            }
        }


class DomainEvent(BaseModel):
    """An event published to the domain event bus."""

    type: str = Field(..., min_length=1)
    data: dict[str, Any] = Field(default_factory=dict)

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "type": "MaidsBulkUploaded",
                "data": {
                    "agencyId": "agency-42",
                    "uploadedBy": "user-7",
                    "count": 1,
                    "uploadedAt": "2025-11-17T10:00:00+00:00"
                }
            }
        }
