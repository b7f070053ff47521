"""
Pytest configuration and fixtures for maid-ingest tests

This module provides shared fixtures for unit, integration, and E2E tests.
"""
import os
from datetime import datetime, timezone
from typing import Any, Callable, Generator

import pytest

from maid_ingest.batch import BulkUploadPipeline
from maid_ingest.config import IngestSettings
from maid_ingest.events import InMemoryEventBus
from maid_ingest.warehouse import InMemoryAuditLogger, InMemoryProfileRepository

# Every test runs against this "now" so that ages and expiry dates are stable
FIXED_NOW = datetime(2025, 6, 15, 12, 0, 0, tzinfo=timezone.utc)


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external services"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests that require Docker containers"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests that test the full upload flow"
    )
    config.addinivalue_line(
        "markers", "slow: Tests that take more than 5 seconds to run"
    )


# =======================
# ROW FIXTURES
# =======================

def make_row(**overrides: Any) -> dict[str, Any]:
    """A valid raw row for a 30-year-old (relative to FIXED_NOW), with overrides."""
    row = {
        "fullName": "Tigist Alemu",
        "dateOfBirth": "1995-03-10",
        "phone": "+251 911 234 567",
        "email": "tigist@example.com",
        "skills": ["cooking", "childcare"],
        "languages": ["amharic", "english"],
        "experienceYears": 4,
        "preferredSalaryMin": 400,
        "preferredSalaryMax": 600,
    }
    row.update(overrides)
    return row


@pytest.fixture
def valid_row() -> dict[str, Any]:
    return make_row()


@pytest.fixture
def row_factory() -> Callable[..., dict[str, Any]]:
    return make_row


# =======================
# COLLABORATOR FIXTURES
# =======================

@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    return lambda: FIXED_NOW


@pytest.fixture
def settings() -> IngestSettings:
    return IngestSettings()


@pytest.fixture
def repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def audit_logger() -> InMemoryAuditLogger:
    return InMemoryAuditLogger()


@pytest.fixture
def event_bus() -> InMemoryEventBus:
    return InMemoryEventBus()


@pytest.fixture
def pipeline(repository, audit_logger, event_bus, settings, fixed_clock) -> BulkUploadPipeline:
    """Pipeline wired to in-memory collaborators and the fixed clock."""
    return BulkUploadPipeline(
        repository=repository,
        audit_logger=audit_logger,
        event_bus=event_bus,
        settings=settings,
        clock=fixed_clock,
    )


# =======================
# DATABASE FIXTURES (Testcontainers)
# =======================

@pytest.fixture(scope="session")
def postgres_container():
    """
    Start PostgreSQL container for integration tests

    Skips the requesting tests when Docker is not available.

    Yields:
        PostgresContainer instance with initialized schema
    """
    testcontainers_postgres = pytest.importorskip("testcontainers.postgres")
    import psycopg

    container = testcontainers_postgres.PostgresContainer(
        image="postgres:16.2-alpine",
        username="test_ingest",
        password="test_password",
        dbname="test_maid_ingest",
        driver=None,
    )
    try:
        container.start()
    except Exception as e:
        pytest.skip(f"Docker is not available: {e}")

    try:
        init_sql_path = os.path.join(
            os.path.dirname(os.path.dirname(__file__)),
            "docker",
            "init-db.sql"
        )
        with open(init_sql_path) as f:
            init_sql = f.read()

        with psycopg.connect(container.get_connection_url()) as conn:
            with conn.cursor() as cur:
                cur.execute(init_sql)
            conn.commit()

        yield container
    finally:
        container.stop()


@pytest.fixture
def db_pool(postgres_container) -> Generator:
    """Open DatabaseConnectionPool pointed at the test container."""
    from maid_ingest.warehouse.connection import DatabaseConnectionPool

    pool = DatabaseConnectionPool(
        host=postgres_container.get_container_host_ip(),
        port=int(postgres_container.get_exposed_port(5432)),
        database="test_maid_ingest",
        user="test_ingest",
        password="test_password",
    )
    with pool:
        yield pool


@pytest.fixture
def clean_db(db_pool) -> Generator:
    """Truncate all tables before each test"""
    with db_pool.get_connection() as conn:
        with conn.cursor() as cur:
            cur.execute("TRUNCATE TABLE audit_log")
            cur.execute("TRUNCATE TABLE maid_profiles")
        conn.commit()

    yield db_pool


# =======================
# CONFIGURATION FIXTURES
# =======================

@pytest.fixture(scope="session")
def test_env_vars():
    """
    Set test environment variables

    This fixture loads config/test.env and sets environment variables
    """
    from dotenv import load_dotenv

    env_path = os.path.join(
        os.path.dirname(os.path.dirname(__file__)),
        "config",
        "test.env"
    )

    if os.path.exists(env_path):
        load_dotenv(env_path, override=True)


# =======================
# FILE FIXTURES
# =======================

@pytest.fixture(scope="session")
def test_data_dir() -> str:
    """
    Get path to test data fixtures directory

    Returns:
        Path to tests/fixtures directory
    """
    return os.path.join(os.path.dirname(__file__), "fixtures")
