"""
Core data models for bulk profile ingestion.

All models use Pydantic for runtime validation and type safety.
"""

from .audit_entry import AuditEntry, DomainEvent
from .batch import BatchRequest, BatchResult, BatchSummary
from .profile_record import SanitizedProfileRecord
from .row_outcome import RowOutcome
from .validation_result import ValidationResult

__all__ = [
    "SanitizedProfileRecord",
    "ValidationResult",
    "RowOutcome",
    "BatchRequest",
    "BatchSummary",
    "BatchResult",
    "AuditEntry",
    "DomainEvent",
]
