"""
PostgreSQL-backed profile repository.

Each profile is one row in ``maid_profiles``: the columns used for lookup
and uniqueness, plus the full sanitized record as JSONB.
"""

import psycopg
from psycopg.types.json import Jsonb

from maid_ingest.core.exceptions import RepositoryError
from maid_ingest.core.models import SanitizedProfileRecord
from maid_ingest.core.ports import ProfileRepository
from maid_ingest.observability.logger import get_logger

from .connection import DatabaseConnectionPool

logger = get_logger(__name__)

PHONE_CONSTRAINT = "maid_profiles_agency_phone_key"


class PostgresProfileRepository(ProfileRepository):
    """
    Inserts sanitized profiles into PostgreSQL.

    Every create runs in its own transaction, so a rejected row never
    affects rows committed before it.
    """

    INSERT_SQL = """
        INSERT INTO maid_profiles (
            agency_id,
            full_name,
            date_of_birth,
            phone,
            email,
            nationality,
            availability_status,
            verification_status,
            status,
            agency_approved,
            profile
        ) VALUES (
            %(agency_id)s,
            %(full_name)s,
            %(date_of_birth)s,
            %(phone)s,
            %(email)s,
            %(nationality)s,
            %(availability_status)s,
            %(verification_status)s,
            %(status)s,
            %(agency_approved)s,
            %(profile)s
        ) RETURNING id;
    """

    def __init__(self, pool: DatabaseConnectionPool):
        """
        Initialize the repository.

        Args:
            pool: Open database connection pool
        """
        self.pool = pool

    def create(self, record: SanitizedProfileRecord) -> str:
        """
        Insert one profile.

        Returns:
            The generated profile UUID as a string

        Raises:
            RepositoryError: On unique violations ("duplicate phone") or any
                other database error
        """
        if not record.agency_id:
            raise RepositoryError("Profile must belong to an agency")

        params = {
            "agency_id": record.agency_id,
            "full_name": record.full_name,
            "date_of_birth": record.date_of_birth,
            "phone": record.phone,
            "email": record.email,
            "nationality": record.nationality,
            "availability_status": record.availability_status,
            "verification_status": record.verification_status,
            "status": record.status,
            "agency_approved": record.agency_approved,
            "profile": Jsonb(record.model_dump(mode="json", by_alias=True)),
        }

        try:
            with self.pool.get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(self.INSERT_SQL, params)
                    row = cur.fetchone()
                conn.commit()
        except psycopg.errors.UniqueViolation as e:
            if e.diag.constraint_name == PHONE_CONSTRAINT:
                raise RepositoryError("duplicate phone") from e
            raise RepositoryError(f"Duplicate profile: {e.diag.message_primary}") from e
        except psycopg.DatabaseError as e:
            logger.error(f"Failed to insert profile: {e}")
            raise RepositoryError(f"Failed to store profile: {e}") from e

        profile_id = str(row["id"])
        logger.debug(
            f"Inserted profile {profile_id}",
            extra={"agency_id": record.agency_id, "profile_id": profile_id},
        )
        return profile_id

    def count_by_agency(self, agency_id: str) -> int:
        rows = self.pool.execute_query(
            "SELECT COUNT(*) AS count FROM maid_profiles WHERE agency_id = %s",
            (agency_id,),
        )
        return rows[0]["count"]
