"""
Audit log operations for bulk upload tracking.

This module provides functions to insert and query audit log entries,
and the PostgresAuditLogger adapter built on them.
"""

from typing import Any

import psycopg
from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from maid_ingest.core.models import AuditEntry
from maid_ingest.core.ports import AuditLogger
from maid_ingest.observability.logger import get_logger

from .connection import DatabaseConnectionPool

logger = get_logger(__name__)


def insert_audit_log(
    pool: DatabaseConnectionPool,
    entry: AuditEntry
) -> int:
    """
    Insert a single audit log entry into the database.

    Args:
        pool: Database connection pool
        entry: AuditEntry model instance

    Returns:
        log_id: Generated log ID

    Raises:
        psycopg.DatabaseError: If insert fails
    """
    insert_sql = """
        INSERT INTO audit_log (
            action,
            user_id,
            agency_id,
            resource_id,
            metadata,
            error,
            created_at
        ) VALUES (
            %(action)s,
            %(user_id)s,
            %(agency_id)s,
            %(resource_id)s,
            %(metadata)s,
            %(error)s,
            %(created_at)s
        ) RETURNING log_id;
    """

    try:
        with pool.get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    insert_sql,
                    {
                        "action": entry.action,
                        "user_id": entry.user_id,
                        "agency_id": entry.agency_id,
                        "resource_id": entry.resource_id,
                        "metadata": Jsonb(entry.metadata) if entry.metadata is not None else None,
                        "error": entry.error,
                        "created_at": entry.timestamp,
                    },
                )
                result = cur.fetchone()
                log_id = result["log_id"] if result else None
            conn.commit()

        logger.debug(
            f"Inserted audit log entry: log_id={log_id}, "
            f"agency_id={entry.agency_id}, action={entry.action}"
        )
        return log_id

    except psycopg.DatabaseError as e:
        logger.error(f"Failed to insert audit log: {e}")
        raise


def query_audit_logs_by_agency(
    pool: DatabaseConnectionPool,
    agency_id: str,
    limit: int = 100
) -> list[dict[str, Any]]:
    """
    Query audit log entries for one agency, newest first.

    Args:
        pool: Database connection pool
        agency_id: Agency to query
        limit: Maximum number of entries to return

    Returns:
        List of audit log entries as dictionaries

    Raises:
        psycopg.DatabaseError: If query fails
    """
    query_sql = """
        SELECT
            log_id,
            action,
            user_id,
            agency_id,
            resource_id,
            metadata,
            error,
            created_at
        FROM audit_log
        WHERE agency_id = %(agency_id)s
        ORDER BY created_at DESC, log_id DESC
        LIMIT %(limit)s;
    """

    try:
        with pool.get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(query_sql, {"agency_id": agency_id, "limit": limit})
                results = cur.fetchall()

        logger.debug(f"Found {len(results)} audit log entries for agency_id={agency_id}")
        return results

    except psycopg.DatabaseError as e:
        logger.error(f"Failed to query audit logs by agency: {e}")
        raise


class PostgresAuditLogger(AuditLogger):
    """AuditLogger port backed by the ``audit_log`` table."""

    def __init__(self, pool: DatabaseConnectionPool):
        self.pool = pool

    def log(self, entry: AuditEntry) -> None:
        insert_audit_log(self.pool, entry)

    def query(self, agency_id: str, limit: int = 100) -> list[dict[str, Any]]:
        return query_audit_logs_by_agency(self.pool, agency_id, limit)
