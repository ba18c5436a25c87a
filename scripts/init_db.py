#!/usr/bin/env python
"""Create the payslip tables in the configured database.

Usage:
    python scripts/init_db.py
    python scripts/init_db.py --database-url postgresql+asyncpg://...
    python scripts/init_db.py --dry-run
"""

import argparse
import asyncio
import sys

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.schema import CreateTable

from payslip_service.config import configure_logging, get_settings
from payslip_service.database import check_connection, create_tables
from payslip_service.models import Base


async def run(database_url: str, dry_run: bool) -> int:
    engine = create_async_engine(database_url)
    try:
        if dry_run:
            for table in Base.metadata.sorted_tables:
                print(str(CreateTable(table).compile(dialect=engine.dialect)).strip() + ";\n")
            return 0

        await check_connection(engine)
        await create_tables(engine)
        print(f"Created tables: {', '.join(Base.metadata.tables)}")
        return 0
    except SQLAlchemyError as e:
        print(f"ERROR: {e}")
        return 1
    finally:
        await engine.dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Create payslip tables")
    parser.add_argument(
        "--database-url",
        default=None,
        help="Database URL (defaults to DATABASE_URL)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the DDL without executing it",
    )
    args = parser.parse_args()

    configure_logging()
    database_url = args.database_url or get_settings().database_url
    sys.exit(asyncio.run(run(database_url, args.dry_run)))


if __name__ == "__main__":
    main()
