"""
Persistence and audit adapters: PostgreSQL and in-memory.

The PostgreSQL adapters import psycopg; import them from their modules
(``maid_ingest.warehouse.profile_repository``, ``maid_ingest.warehouse.audit``).
"""

from .memory import InMemoryAuditLogger, InMemoryProfileRepository

__all__ = ["InMemoryAuditLogger", "InMemoryProfileRepository"]
