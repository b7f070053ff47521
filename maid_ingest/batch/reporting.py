"""
Reporting sink: the audit record and domain event emitted after a batch.
"""

from datetime import datetime
from typing import Callable

from maid_ingest.core.exceptions import ReportingError
from maid_ingest.core.models import AuditEntry, BatchRequest, BatchResult, DomainEvent
from maid_ingest.core.models.audit_entry import utc_now
from maid_ingest.core.ports import AuditLogger, EventBus
from maid_ingest.observability.logger import get_logger
from maid_ingest.observability.metrics import record_reporting_failure

logger = get_logger(__name__)

ACTION_VALIDATED = "bulk_upload_validated"
ACTION_COMPLETED = "bulk_upload_completed"
ACTION_FAILED = "bulk_upload_failed"

EVENT_MAIDS_BULK_UPLOADED = "MaidsBulkUploaded"


class BatchReporter:
    """
    Emits one audit record per attempted batch and, for committed batches
    with at least one created profile, one MaidsBulkUploaded event.

    Both emissions are best-effort: failures are logged and counted but
    never undo committed rows. With ``strict=True`` an audit failure is
    raised as ReportingError instead.
    """

    def __init__(
        self,
        audit_logger: AuditLogger,
        event_bus: EventBus | None = None,
        clock: Callable[[], datetime] = utc_now,
        strict: bool = False,
    ):
        """
        Initialize reporter.

        Args:
            audit_logger: Audit trail sink (required)
            event_bus: Domain event bus (optional)
            clock: Timestamp source for entries and events
            strict: Raise ReportingError when the audit sink fails
        """
        if audit_logger is None:
            raise ValueError("AuditLogger is required")

        self.audit_logger = audit_logger
        self.event_bus = event_bus
        self.clock = clock
        self.strict = strict

    def _entry(self, **fields) -> AuditEntry:
        return AuditEntry(timestamp=self.clock(), **fields)

    def report(self, request: BatchRequest, result: BatchResult) -> None:
        """
        Emit the audit record and, when due, the domain event.

        Raises:
            ReportingError: Only in strict mode, when the audit sink fails
        """
        summary = result.summary
        entry = self._entry(
            action=ACTION_VALIDATED if request.dry_run else ACTION_COMPLETED,
            user_id=request.requesting_user_id,
            agency_id=request.agency_id,
            metadata={
                "totalAttempted": summary.total,
                "succeeded": summary.succeeded,
                "failed": summary.failed,
                "failureRate": summary.failure_rate,
            },
        )

        try:
            self.audit_logger.log(entry)
        except Exception as e:
            record_reporting_failure("audit")
            if self.strict:
                raise ReportingError(f"Audit log failed: {e}") from e
            logger.error(
                "Audit log failed; batch result is unaffected",
                exc_info=True,
                extra={"agency_id": request.agency_id, "action": entry.action},
            )

        if not request.dry_run and summary.succeeded > 0 and self.event_bus is not None:
            self._publish(request, summary.succeeded)

    def _publish(self, request: BatchRequest, count: int) -> None:
        event = DomainEvent(
            type=EVENT_MAIDS_BULK_UPLOADED,
            data={
                "agencyId": request.agency_id,
                "uploadedBy": request.requesting_user_id,
                "count": count,
                "uploadedAt": self.clock(),
            },
        )
        try:
            self.event_bus.publish(event)
        except Exception:
            record_reporting_failure("event")
            logger.error(
                f"Publishing {event.type} failed",
                exc_info=True,
                extra={"agency_id": request.agency_id},
            )

    def report_failure(self, request: BatchRequest, error: BaseException) -> None:
        """Best-effort audit record for a batch that failed after it started."""
        entry = self._entry(
            action=ACTION_FAILED,
            user_id=request.requesting_user_id,
            agency_id=request.agency_id,
            error=str(error),
        )
        try:
            self.audit_logger.log(entry)
        except Exception:
            record_reporting_failure("audit")
            logger.error(
                "Failure audit log failed",
                exc_info=True,
                extra={"agency_id": request.agency_id},
            )
