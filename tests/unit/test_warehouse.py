"""
Unit tests for the in-memory profile repository and audit logger.
"""

from datetime import date

import pytest

from maid_ingest.core.exceptions import RepositoryError
from maid_ingest.core.models import AuditEntry, SanitizedProfileRecord
from maid_ingest.warehouse import InMemoryAuditLogger, InMemoryProfileRepository


def _record(**overrides):
    fields = {
        "full_name": "Tigist Alemu",
        "date_of_birth": date(1995, 3, 10),
        "agency_id": "agency-42",
        "phone": "+251 911 234 567",
    }
    fields.update(overrides)
    return SanitizedProfileRecord(**fields)


class TestInMemoryProfileRepository:
    """Tests for InMemoryProfileRepository"""

    def test_create_returns_unique_ids(self):
        repository = InMemoryProfileRepository()

        first = repository.create(_record(phone="1"))
        second = repository.create(_record(phone="2"))

        assert first != second
        assert repository.get(first).phone == "1"
        assert repository.create_calls == 2

    def test_duplicate_phone_in_same_agency(self):
        repository = InMemoryProfileRepository()
        repository.create(_record())

        with pytest.raises(RepositoryError, match="duplicate phone"):
            repository.create(_record(full_name="Someone Else"))

        assert repository.create_calls == 2
        assert len(repository.profiles) == 1

    def test_same_phone_in_other_agency_is_allowed(self):
        repository = InMemoryProfileRepository()
        repository.create(_record())
        repository.create(_record(agency_id="agency-43"))

        assert len(repository.list_by_agency("agency-42")) == 1
        assert len(repository.list_by_agency("agency-43")) == 1

    def test_profiles_without_phone_never_collide(self):
        repository = InMemoryProfileRepository()
        repository.create(_record(phone=None))
        repository.create(_record(phone=None))

        assert len(repository.profiles) == 2

    def test_uniqueness_can_be_disabled(self):
        repository = InMemoryProfileRepository(unique_phone=False)
        repository.create(_record())
        repository.create(_record())

        assert len(repository.profiles) == 2

    def test_get_unknown_id(self):
        assert InMemoryProfileRepository().get("missing") is None


class TestInMemoryAuditLogger:
    """Tests for InMemoryAuditLogger"""

    def test_log_assigns_sequential_ids(self):
        audit_logger = InMemoryAuditLogger()

        for action in ("bulk_upload_validated", "bulk_upload_completed"):
            audit_logger.log(AuditEntry(action=action, user_id="user-7", agency_id="agency-42"))

        assert [e.log_id for e in audit_logger.entries] == [1, 2]

    def test_query_filters(self):
        audit_logger = InMemoryAuditLogger()
        audit_logger.log(AuditEntry(action="bulk_upload_completed", user_id="u", agency_id="agency-42"))
        audit_logger.log(AuditEntry(action="bulk_upload_failed", user_id="u", agency_id="agency-42"))
        audit_logger.log(AuditEntry(action="bulk_upload_completed", user_id="u", agency_id="agency-43"))

        assert len(audit_logger.query(agency_id="agency-42")) == 2
        assert len(audit_logger.query(action="bulk_upload_completed")) == 2
        assert len(audit_logger.query(agency_id="agency-43", action="bulk_upload_failed")) == 0
