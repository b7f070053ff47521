"""
Collaborator interfaces the ingestion core depends on.

Adapters live in maid_ingest.warehouse (persistence, audit) and
maid_ingest.events (event bus).
"""

from abc import ABC, abstractmethod

from maid_ingest.core.models import AuditEntry, DomainEvent, SanitizedProfileRecord


class ProfileRepository(ABC):
    """Stores sanitized profiles."""

    @abstractmethod
    def create(self, record: SanitizedProfileRecord) -> str:
        """
        Persist a profile.

        Returns:
            Identifier of the new profile

        Raises:
            RepositoryError: If the store rejects the record
        """
        pass


class AuditLogger(ABC):
    """Receives one audit entry per attempted batch."""

    @abstractmethod
    def log(self, entry: AuditEntry) -> None:
        pass


class EventBus(ABC):
    """Publishes domain events (optional collaborator)."""

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        pass
