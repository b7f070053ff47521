"""
Bulk upload pipeline orchestration.

Coordinates the flow: check batch → process rows in order → summarize → report
"""

import threading
import time
from datetime import datetime
from typing import Any, Callable

from maid_ingest.config import IngestSettings
from maid_ingest.core.exceptions import BulkUploadError, PreconditionError
from maid_ingest.core.models import BatchRequest, BatchResult, RowOutcome
from maid_ingest.core.models.audit_entry import utc_now
from maid_ingest.core.ports import AuditLogger, EventBus, ProfileRepository
from maid_ingest.core.rules import ProfileValidator
from maid_ingest.observability.logger import get_logger, log_operation
from maid_ingest.observability.metrics import record_batch, record_row_outcome

from .reporting import BatchReporter
from .row_processor import RowProcessor

logger = get_logger(__name__)


class BulkUploadPipeline:
    """
    Orchestrates one agency bulk upload.

    Flow:
    1. Reject malformed requests (PreconditionError, nothing audited)
    2. Process every row strictly in input order, one at a time
    3. Derive the summary from the row outcomes
    4. Emit the audit record and, when due, the domain event
    5. Return the BatchResult

    A failure outside the per-row boundary (e.g. the audit sink in strict
    mode) is audited as ``bulk_upload_failed`` and re-raised as
    BulkUploadError. Rows committed before that point stay committed.
    """

    def __init__(
        self,
        repository: ProfileRepository,
        audit_logger: AuditLogger,
        event_bus: EventBus | None = None,
        settings: IngestSettings | None = None,
        clock: Callable[[], datetime] = utc_now,
        validator: ProfileValidator | None = None,
    ):
        """
        Initialize bulk upload pipeline.

        Args:
            repository: Profile store used for committed batches
            audit_logger: Audit trail sink
            event_bus: Optional domain event bus
            settings: Batch limit, age bounds, defaults, strict reporting
            clock: Source of "now" for age checks and timestamps
            validator: Override the profile validator
        """
        if repository is None:
            raise ValueError("ProfileRepository is required")
        if audit_logger is None:
            raise ValueError("AuditLogger is required")

        self.settings = settings or IngestSettings()
        self.validator = validator or ProfileValidator(self.settings, clock=clock)
        self.row_processor = RowProcessor(repository, self.validator)
        self.reporter = BatchReporter(
            audit_logger,
            event_bus=event_bus,
            clock=clock,
            strict=self.settings.strict_reporting,
        )

    def execute(
        self,
        agency_id: Any,
        user_id: Any,
        rows: Any,
        dry_run: bool = False,
        **run_options: Any,
    ) -> BatchResult:
        """
        Convenience entry point taking the request fields directly.

        See run() for run_options (cancel_event, timeout_seconds).
        """
        request = BatchRequest(
            agency_id=agency_id,
            requesting_user_id=user_id,
            rows=rows,
            dry_run=dry_run,
        )
        return self.run(request, **run_options)

    def run(
        self,
        request: BatchRequest,
        cancel_event: threading.Event | None = None,
        timeout_seconds: float | None = None,
    ) -> BatchResult:
        """
        Run a bulk upload.

        Args:
            request: The batch to process
            cancel_event: When set between rows, remaining rows are skipped
            timeout_seconds: Deadline measured from the start of the batch

        Returns:
            BatchResult with one outcome per row

        Raises:
            PreconditionError: If the request is malformed
            BulkUploadError: If the batch failed after it started
        """
        mode = "dry_run" if request.dry_run else "commit"

        try:
            self._check_preconditions(request)
        except PreconditionError:
            record_batch(mode, "rejected")
            raise

        rows = list(request.rows)

        with log_operation(
            "Bulk upload",
            logger=logger,
            agency_id=request.agency_id,
            row_count=len(rows),
            dry_run=request.dry_run,
        ) as operation:
            try:
                result = self._process_rows(request, rows, cancel_event, timeout_seconds)
                self.reporter.report(request, result)
            except Exception as e:
                record_batch(mode, "failed", len(rows), operation.elapsed)
                self.reporter.report_failure(request, e)
                raise BulkUploadError(f"Bulk upload failed: {e}") from e

            summary = result.summary
            record_batch(
                mode,
                "cancelled" if summary.cancelled else "completed",
                len(rows),
                operation.elapsed,
            )
            logger.info(
                f"Bulk upload processed {summary.total} rows: "
                f"{summary.succeeded} succeeded, {summary.failed} failed",
                extra={
                    "agency_id": request.agency_id,
                    "succeeded": summary.succeeded,
                    "failed": summary.failed,
                    "failure_rate": summary.failure_rate,
                },
            )

        return result

    def _check_preconditions(self, request: BatchRequest) -> None:
        """
        Validate the batch before any row is touched.

        Raises:
            PreconditionError: For missing identifiers or an empty/oversized batch
        """
        if not isinstance(request.agency_id, str) or not request.agency_id.strip():
            raise PreconditionError("agencyId is required")

        if not isinstance(request.requesting_user_id, str) or not request.requesting_user_id.strip():
            raise PreconditionError("userId is required")

        if not isinstance(request.rows, (list, tuple)) or len(request.rows) == 0:
            raise PreconditionError("rows must be a non-empty array")

        max_batch_size = self.settings.max_batch_size
        if len(request.rows) > max_batch_size:
            raise PreconditionError(f"Batch size exceeds maximum of {max_batch_size} profiles")

    def _process_rows(
        self,
        request: BatchRequest,
        rows: list[Any],
        cancel_event: threading.Event | None,
        timeout_seconds: float | None,
    ) -> BatchResult:
        """Process rows sequentially; each row finishes before the next starts."""
        deadline = time.monotonic() + timeout_seconds if timeout_seconds is not None else None
        successful: list[RowOutcome] = []
        failed: list[RowOutcome] = []
        cancelled = False

        for index, raw in enumerate(rows):
            row_number = index + 1

            if not cancelled and self._should_stop(cancel_event, deadline):
                cancelled = True
                logger.warning(
                    f"Bulk upload cancelled before row {row_number}",
                    extra={"agency_id": request.agency_id, "row_number": row_number},
                )

            if cancelled:
                record_row_outcome("failed", "cancelled")
                failed.append(RowOutcome.failure(
                    row_number,
                    raw,
                    f"Batch cancelled before row {row_number} was processed",
                    "cancelled",
                ))
                continue

            outcome = self.row_processor.process(raw, row_number, request.agency_id, request.dry_run)
            if outcome.succeeded:
                successful.append(outcome)
            else:
                failed.append(outcome)

        return BatchResult(
            successful=successful,
            failed=failed,
            dry_run=request.dry_run,
            cancelled=cancelled,
        )

    @staticmethod
    def _should_stop(cancel_event: threading.Event | None, deadline: float | None) -> bool:
        if cancel_event is not None and cancel_event.is_set():
            return True
        return deadline is not None and time.monotonic() >= deadline
