"""
Batch-level models: the request, the derived summary and the aggregated result.
"""

from typing import Any, List

from pydantic import BaseModel, Field, computed_field

from .row_outcome import RowOutcome


class BatchRequest(BaseModel):
    """
    One bulk upload submitted by an agency user.

    The model accepts any shape on purpose: batch preconditions (identifiers
    present, 1 to 100 rows) are enforced by the pipeline so that they surface
    as PreconditionError rather than as model errors.

    Attributes:
        agency_id: Agency that owns every uploaded profile
        requesting_user_id: User performing the upload (for audit)
        rows: Raw profile rows, in spreadsheet order
        dry_run: Validate only, never persist
    """

    agency_id: Any = None
    requesting_user_id: Any = None
    rows: Any = None
    dry_run: bool = False

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "agency_id": "agency-42",
                "requesting_user_id": "user-7",
                "rows": [{"fullName": "Tigist Alemu", "dateOfBirth": "1995-04-12"}],
                "dry_run": True
            }
        }


class BatchSummary(BaseModel):
    """Aggregate counts for a batch, derived from its outcomes."""

    total: int = Field(..., ge=0)
    succeeded: int = Field(..., ge=0)
    failed: int = Field(..., ge=0)
    dry_run: bool
    cancelled: bool = False

    @property
    def failure_rate(self) -> str:
        """Failure percentage formatted as "NN.NN%"."""
        rate = (self.failed / self.total * 100) if self.total else 0.0
        return f"{rate:.2f}%"

    class Config:
        frozen = True


class BatchResult(BaseModel):
    """
    Sole return value of a bulk upload.

    ``summary`` is recomputed from ``successful`` and ``failed`` on every
    access so the counts can never drift from the outcome lists.
    """

    successful: List[RowOutcome] = Field(default_factory=list)
    failed: List[RowOutcome] = Field(default_factory=list)
    dry_run: bool = False
    cancelled: bool = False

    @computed_field
    @property
    def summary(self) -> BatchSummary:
        return BatchSummary(
            total=len(self.successful) + len(self.failed),
            succeeded=len(self.successful),
            failed=len(self.failed),
            dry_run=self.dry_run,
            cancelled=self.cancelled,
        )

    @property
    def outcomes(self) -> List[RowOutcome]:
        """All outcomes ordered by row number."""
        return sorted([*self.successful, *self.failed], key=lambda o: o.row_number)
