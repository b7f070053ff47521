"""
Row processor: the isolation boundary around one uploaded profile.

Whatever goes wrong with a row (bad data, a rejected insert) becomes a
failed RowOutcome; nothing raised for one row can abort the batch.
"""

from typing import Any

from maid_ingest.core.models import RowOutcome
from maid_ingest.core.ports import ProfileRepository
from maid_ingest.core.rules import ProfileValidator
from maid_ingest.observability.logger import get_logger
from maid_ingest.observability.metrics import record_row_outcome, record_validation_failures

logger = get_logger(__name__)


class RowProcessor:
    """
    Validates one row, applies agency ownership and persists it.

    Agency-submitted rows are always owned by the batch's agency and marked
    ``agency_approved``, whatever the row itself says.
    """

    def __init__(self, repository: ProfileRepository, validator: ProfileValidator):
        """
        Initialize row processor.

        Args:
            repository: Where created profiles are stored
            validator: Turns raw rows into sanitized records
        """
        self.repository = repository
        self.validator = validator

    def process(self, raw: Any, row_number: int, agency_id: str, dry_run: bool) -> RowOutcome:
        """
        Process one row into an outcome.

        Args:
            raw: The row as submitted
            row_number: 1-indexed position in the batch
            agency_id: Owning agency
            dry_run: Validate only, skip the repository

        Returns:
            RowOutcome with status created, validated or failed
        """
        result = self.validator.validate(raw)

        if not result.passed:
            record_validation_failures(result.failed_rules)
            return self._failed(
                row_number,
                raw,
                f"Row {row_number} validation errors: {result.error_message}",
                "validation",
            )

        record = result.sanitized.model_copy(
            update={"agency_id": agency_id, "agency_approved": True}
        )

        if dry_run:
            record_row_outcome("validated")
            return RowOutcome.validated(row_number, record)

        try:
            created_id = self.repository.create(record)
        except Exception as e:
            logger.debug("Repository rejected row", exc_info=True, extra={"row_number": row_number})
            return self._failed(row_number, raw, str(e) or e.__class__.__name__, "persistence")

        if not created_id:
            return self._failed(row_number, raw, "Profile was not created", "persistence")

        record_row_outcome("created")
        return RowOutcome.created(row_number, str(created_id), record.full_name)

    def _failed(self, row_number: int, raw: Any, message: str, error_kind: str) -> RowOutcome:
        logger.warning(
            f"Row {row_number} failed",
            extra={"row_number": row_number, "error_kind": error_kind, "error_message": message},
        )
        record_row_outcome("failed", error_kind)
        return RowOutcome.failure(row_number, raw, message, error_kind)
