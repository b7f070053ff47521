"""
In-memory profile repository and audit logger.

Used for dry runs from the command line and throughout the test suite.
"""

import uuid

from maid_ingest.core.exceptions import RepositoryError
from maid_ingest.core.models import AuditEntry, SanitizedProfileRecord
from maid_ingest.core.ports import AuditLogger, ProfileRepository


class InMemoryProfileRepository(ProfileRepository):
    """
    Stores profiles in a dict keyed by generated UUID.

    With ``unique_phone`` set, a second profile with the same phone number
    in the same agency is rejected with ``RepositoryError("duplicate phone")``,
    mirroring the unique index of the PostgreSQL schema.
    """

    def __init__(self, unique_phone: bool = True):
        self.unique_phone = unique_phone
        self.profiles: dict[str, SanitizedProfileRecord] = {}
        self.create_calls = 0

    def create(self, record: SanitizedProfileRecord) -> str:
        self.create_calls += 1

        if self.unique_phone and record.phone:
            for existing in self.profiles.values():
                if existing.agency_id == record.agency_id and existing.phone == record.phone:
                    raise RepositoryError("duplicate phone")

        profile_id = str(uuid.uuid4())
        self.profiles[profile_id] = record
        return profile_id

    def get(self, profile_id: str) -> SanitizedProfileRecord | None:
        return self.profiles.get(profile_id)

    def list_by_agency(self, agency_id: str) -> list[SanitizedProfileRecord]:
        return [p for p in self.profiles.values() if p.agency_id == agency_id]


class InMemoryAuditLogger(AuditLogger):
    """Keeps audit entries in insertion order, assigning sequential log ids."""

    def __init__(self):
        self.entries: list[AuditEntry] = []

    def log(self, entry: AuditEntry) -> None:
        self.entries.append(entry.model_copy(update={"log_id": len(self.entries) + 1}))

    def query(self, agency_id: str | None = None, action: str | None = None) -> list[AuditEntry]:
        return [
            entry for entry in self.entries
            if (agency_id is None or entry.agency_id == agency_id)
            and (action is None or entry.action == action)
        ]
