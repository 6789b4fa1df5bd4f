"""Command line helpers to inspect and restore the company version log."""

from __future__ import annotations

import argparse
import json
import logging

from sqlalchemy.exc import SQLAlchemyError

from company_versions.application.use_cases import (
    list_company_versions,
    revert_company,
)
from company_versions.infrastructure.database import SessionLocal, initialize_database
from company_versions.infrastructure.models import CompanyVersionModel
from company_versions.infrastructure.schema import SUPPORTED_DIALECTS, render_log_table_ddl
from company_versions.schemas import CompanyRead, CompanyVersionRead


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""

    parser = argparse.ArgumentParser(
        description="Inspect the company version log.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    schema_parser = subparsers.add_parser(
        "schema", help="Print the DDL of the company version table."
    )
    schema_parser.add_argument(
        "--dialect",
        choices=SUPPORTED_DIALECTS,
        default="mysql",
        help="SQL dialect used to render the DDL (default: mysql)",
    )

    history_parser = subparsers.add_parser(
        "history", help="Print every logged version of a company."
    )
    history_parser.add_argument("company_id", type=int)

    revert_parser = subparsers.add_parser(
        "revert", help="Restore a company to a previous version."
    )
    revert_parser.add_argument("company_id", type=int)
    revert_parser.add_argument("version", type=int)
    revert_parser.add_argument(
        "--username",
        default=None,
        help="User recorded as the author of the revert (optional)",
    )
    return parser.parse_args()


def print_schema(dialect: str) -> None:
    for statement in render_log_table_ddl(CompanyVersionModel.__table__, dialect):
        print(f"{statement};")


def print_history(company_id: int) -> None:
    session = SessionLocal()
    try:
        entries = list_company_versions(session, company_id)
    except SQLAlchemyError as exc:
        raise SystemExit(f"Could not read the version log: {exc}") from exc
    finally:
        session.close()

    if not entries:
        print(f"No versions recorded for company {company_id}.")
        return

    for entry in entries:
        read_model = CompanyVersionRead.model_validate(entry).model_dump(mode="json")
        print(
            f"v{read_model['version']:<4} {read_model['logged_at'] or '-':<26} "
            f"{read_model['action']:<7} {read_model['username'] or '-':<20} "
            f"{json.dumps(read_model['data'], ensure_ascii=False)}"
        )


def revert(company_id: int, version: int, username: str | None) -> None:
    session = SessionLocal()
    try:
        company = revert_company(session, company_id, version, username=username)
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"Could not revert the company: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Error saving the company to the database: {exc}") from exc
    else:
        print(json.dumps(CompanyRead.model_validate(company).model_dump(mode="json"), indent=2))
    finally:
        session.close()


def main() -> None:
    """Run the requested sub command."""

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    args = parse_args()

    if args.command == "schema":
        print_schema(args.dialect)
        return

    initialize_database()
    if args.command == "history":
        print_history(args.company_id)
    elif args.command == "revert":
        revert(args.company_id, args.version, args.username)


if __name__ == "__main__":
    main()
