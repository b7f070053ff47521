"""
Error taxonomy for bulk profile ingestion.
"""


class BulkUploadError(Exception):
    """Base class for bulk upload failures that reach the caller."""


class PreconditionError(BulkUploadError, ValueError):
    """Raised when the batch request itself is malformed (never audited)."""


class RepositoryError(BulkUploadError):
    """Raised by a profile repository when it rejects or fails to store a record."""


class ReportingError(BulkUploadError):
    """Raised when the audit sink fails and strict reporting is enabled."""
