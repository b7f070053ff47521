"""
Command-line interface for agency bulk uploads.

Usage:
    python -m maid_ingest.cli.upload_cli upload --agency-id <id> --user-id <id> --input <file> [options]
    python -m maid_ingest.cli.upload_cli audit-report --agency-id <id> [options]
"""

import argparse
import json
import sys
from contextlib import ExitStack

from maid_ingest.batch import BulkUploadPipeline, read_rows
from maid_ingest.config import load_settings
from maid_ingest.core.exceptions import BulkUploadError, PreconditionError
from maid_ingest.events import LoggingEventBus
from maid_ingest.observability.logger import get_logger, setup_logger, ROOT_LOGGER_NAME
from maid_ingest.warehouse import InMemoryAuditLogger, InMemoryProfileRepository

logger = get_logger(__name__)


def _open_pool(args, stack: ExitStack):
    # psycopg is only needed for the postgres backend
    from maid_ingest.warehouse.connection import DatabaseConnectionPool

    pool = DatabaseConnectionPool(
        host=args.db_host,
        port=args.db_port,
        database=args.db_name,
        user=args.db_user,
        password=args.db_password,
    )
    return stack.enter_context(pool)


def build_pipeline(args, settings, stack: ExitStack) -> BulkUploadPipeline:
    """Wire the pipeline for the selected backend."""
    if args.backend == "postgres":
        from maid_ingest.warehouse.audit import PostgresAuditLogger
        from maid_ingest.warehouse.profile_repository import PostgresProfileRepository

        pool = _open_pool(args, stack)
        repository = PostgresProfileRepository(pool)
        audit_logger = PostgresAuditLogger(pool)
    else:
        repository = InMemoryProfileRepository()
        audit_logger = InMemoryAuditLogger()

    return BulkUploadPipeline(
        repository=repository,
        audit_logger=audit_logger,
        event_bus=LoggingEventBus(),
        settings=settings,
    )


def upload_command(args) -> int:
    """
    Execute a bulk upload from a file.

    Returns:
        Process exit code: 0 when at least one row succeeded, 1 otherwise
    """
    settings = load_settings(args.config, env_file=args.env_file)
    setup_logger(ROOT_LOGGER_NAME, level=settings.log_level, format_type=settings.log_format)

    try:
        rows = read_rows(args.input, file_format=args.format)
    except (OSError, ValueError) as e:
        logger.error(f"Cannot read input file: {e}")
        return 1

    with ExitStack() as stack:
        pipeline = build_pipeline(args, settings, stack)
        try:
            result = pipeline.execute(
                agency_id=args.agency_id,
                user_id=args.user_id,
                rows=rows,
                dry_run=args.dry_run,
                timeout_seconds=args.timeout,
            )
        except PreconditionError as e:
            logger.error(f"Batch rejected: {e}")
            return 1
        except BulkUploadError as e:
            logger.error(str(e))
            return 1

    print(result.model_dump_json(indent=2, by_alias=True))
    return 0 if result.summary.succeeded > 0 else 1


def audit_report_command(args) -> int:
    """Print the most recent audit entries for an agency (postgres backend)."""
    from maid_ingest.warehouse.audit import query_audit_logs_by_agency

    with ExitStack() as stack:
        pool = _open_pool(args, stack)
        entries = query_audit_logs_by_agency(pool, args.agency_id, limit=args.limit)

    print(json.dumps(entries, indent=2, default=str))
    return 0


def _add_db_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--db-host", default=None, help="Database host (default: $DB_HOST or localhost)")
    parser.add_argument("--db-port", type=int, default=None, help="Database port (default: $DB_PORT or 5432)")
    parser.add_argument("--db-name", default=None, help="Database name (default: $DB_NAME)")
    parser.add_argument("--db-user", default=None, help="Database user (default: $DB_USER)")
    parser.add_argument("--db-password", default=None, help="Database password (default: $DB_PASSWORD)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Agency bulk upload of maid profiles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate a spreadsheet export without writing anything
  python -m maid_ingest.cli.upload_cli upload --agency-id agency-42 --user-id user-7 \\
      --input maids.csv --dry-run

  # Commit to PostgreSQL
  python -m maid_ingest.cli.upload_cli upload --agency-id agency-42 --user-id user-7 \\
      --input maids.json --backend postgres
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    upload_parser = subparsers.add_parser("upload", help="Upload a file of profiles")
    upload_parser.add_argument("--agency-id", required=True, help="Owning agency ID")
    upload_parser.add_argument("--user-id", required=True, help="Requesting user ID (for audit)")
    upload_parser.add_argument("--input", required=True, help="Path to JSON or CSV file")
    upload_parser.add_argument(
        "--format",
        default=None,
        choices=["json", "csv"],
        help="Input format (default: from file extension)"
    )
    upload_parser.add_argument("--dry-run", action="store_true", help="Validate without persisting")
    upload_parser.add_argument(
        "--backend",
        default="memory",
        choices=["memory", "postgres"],
        help="Where profiles and audit entries go (default: memory)"
    )
    upload_parser.add_argument("--timeout", type=float, default=None, help="Stop processing rows after N seconds")
    upload_parser.add_argument("--config", default=None, help="Path to settings YAML file")
    upload_parser.add_argument("--env-file", default=None, help="Path to .env file")
    _add_db_arguments(upload_parser)

    report_parser = subparsers.add_parser("audit-report", help="Show recent audit entries for an agency")
    report_parser.add_argument("--agency-id", required=True, help="Agency ID")
    report_parser.add_argument("--limit", type=int, default=20, help="Maximum entries (default: 20)")
    _add_db_arguments(report_parser)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "upload":
        return upload_command(args)
    if args.command == "audit-report":
        return audit_report_command(args)
    return 1


if __name__ == "__main__":
    sys.exit(main())
