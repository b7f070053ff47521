"""
Integration tests for the PostgreSQL adapters.

Tests the connection pool, profile repository and audit logger against a
real PostgreSQL started with testcontainers.
"""

from datetime import date, datetime, timezone

import pytest

from maid_ingest.batch import BulkUploadPipeline
from maid_ingest.core.exceptions import RepositoryError
from maid_ingest.core.models import AuditEntry, SanitizedProfileRecord
from maid_ingest.events import InMemoryEventBus

from conftest import FIXED_NOW, make_row


def _record(agency_id="agency-42", phone="+251 911 234 567"):
    return SanitizedProfileRecord(
        full_name="Tigist Alemu",
        date_of_birth=date(1995, 3, 10),
        phone=phone,
        skills=["cooking"],
        agency_id=agency_id,
        agency_approved=True,
    )


@pytest.mark.integration
def test_connection_pool_round_trip(clean_db):
    rows = clean_db.execute_query("SELECT 1 AS test")
    assert rows[0]["test"] == 1


def test_connection_pool_requires_open():
    from maid_ingest.warehouse.connection import DatabaseConnectionPool

    pool = DatabaseConnectionPool(password="unused")

    with pytest.raises(RuntimeError, match="not open"):
        with pool.get_connection():
            pass


@pytest.mark.integration
def test_repository_creates_profile(clean_db):
    from maid_ingest.warehouse.profile_repository import PostgresProfileRepository

    repository = PostgresProfileRepository(clean_db)

    profile_id = repository.create(_record())

    rows = clean_db.execute_query(
        "SELECT agency_id, full_name, agency_approved, profile FROM maid_profiles WHERE id = %s",
        (profile_id,),
    )
    assert rows[0]["agency_id"] == "agency-42"
    assert rows[0]["agency_approved"] is True
    assert rows[0]["profile"]["fullName"] == "Tigist Alemu"
    assert rows[0]["profile"]["skills"] == ["cooking"]
    assert repository.count_by_agency("agency-42") == 1


@pytest.mark.integration
def test_repository_duplicate_phone(clean_db):
    from maid_ingest.warehouse.profile_repository import PostgresProfileRepository

    repository = PostgresProfileRepository(clean_db)
    repository.create(_record())

    with pytest.raises(RepositoryError, match="duplicate phone"):
        repository.create(_record())

    # same phone under another agency is a different profile
    repository.create(_record(agency_id="agency-43"))
    assert repository.count_by_agency("agency-42") == 1


@pytest.mark.integration
def test_repository_requires_agency(clean_db):
    from maid_ingest.warehouse.profile_repository import PostgresProfileRepository

    with pytest.raises(RepositoryError, match="agency"):
        PostgresProfileRepository(clean_db).create(_record(agency_id=None))


@pytest.mark.integration
def test_audit_logger_round_trip(clean_db):
    from maid_ingest.warehouse.audit import PostgresAuditLogger

    audit_logger = PostgresAuditLogger(clean_db)
    audit_logger.log(AuditEntry(
        action="bulk_upload_completed",
        user_id="user-7",
        agency_id="agency-42",
        metadata={"totalAttempted": 2, "succeeded": 1, "failed": 1, "failureRate": "50.00%"},
        timestamp=datetime(2025, 6, 15, 12, 0, tzinfo=timezone.utc),
    ))
    audit_logger.log(AuditEntry(
        action="bulk_upload_failed",
        user_id="user-7",
        agency_id="agency-42",
        error="Audit log failed: timeout",
        timestamp=datetime(2025, 6, 15, 12, 5, tzinfo=timezone.utc),
    ))

    entries = audit_logger.query("agency-42")

    assert [e["action"] for e in entries] == ["bulk_upload_failed", "bulk_upload_completed"]
    assert entries[1]["metadata"]["failureRate"] == "50.00%"
    assert entries[0]["error"] == "Audit log failed: timeout"
    assert audit_logger.query("agency-43") == []


@pytest.mark.integration
@pytest.mark.e2e
def test_pipeline_against_postgres(clean_db):
    from maid_ingest.warehouse.audit import PostgresAuditLogger
    from maid_ingest.warehouse.profile_repository import PostgresProfileRepository

    event_bus = InMemoryEventBus()
    pipeline = BulkUploadPipeline(
        repository=PostgresProfileRepository(clean_db),
        audit_logger=PostgresAuditLogger(clean_db),
        event_bus=event_bus,
        clock=lambda: FIXED_NOW,
    )
    rows = [
        make_row(),
        make_row(fullName=None),
        make_row(fullName="Tigist Again"),  # same phone as row 1
        make_row(fullName="Almaz Bekele", phone="+251 911 000 001"),
    ]

    result = pipeline.execute("agency-42", "user-7", rows)

    assert [o.row_number for o in result.successful] == [1, 4]
    assert [(o.row_number, o.error_kind) for o in result.failed] == [
        (2, "validation"),
        (3, "persistence"),
    ]
    assert result.failed[1].error_message == "duplicate phone"
    assert PostgresProfileRepository(clean_db).count_by_agency("agency-42") == 2

    [entry] = PostgresAuditLogger(clean_db).query("agency-42")
    assert entry["action"] == "bulk_upload_completed"
    assert entry["metadata"] == {
        "totalAttempted": 4,
        "succeeded": 2,
        "failed": 2,
        "failureRate": "50.00%",
    }
    assert event_bus.published[0].data["count"] == 2
