#!/usr/bin/env python3
"""
Create the hospital schema and load the demonstration data.

Usage:
    python seed_db.py [--db-path PATH] [--init-only]

Options:
    --db-path PATH    Path to database file (default: from core.config)
    --init-only       Create the tables but do not insert seed rows
"""
import argparse
import logging
import sys
from typing import List, Optional

from core.config import DATABASE_PATH
from core.dependencies import get_seed_service
from core.exceptions import HospitalServiceError
from core.logging_config import setup_logging
from repositories import Database

logger = logging.getLogger("seed_db")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Create the hospital schema and load the demonstration data"
    )
    parser.add_argument(
        "--db-path",
        type=str,
        default=DATABASE_PATH,
        help=f"Path to database file (default: {DATABASE_PATH})"
    )
    parser.add_argument(
        "--init-only",
        action="store_true",
        help="Create the tables but do not insert seed rows"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    setup_logging(json_format=False)

    try:
        db = Database(db_path=args.db_path)
        if args.init_only:
            logger.info(f"Schema ready at {args.db_path}")
            return 0

        inserted = get_seed_service(db).seed()
    except HospitalServiceError as e:
        logger.error(f"Seeding failed: {e.detail}", extra={"context": e.context})
        return 1

    for table, count in inserted.items():
        logger.info(f"{table}: {count} rows")
    logger.info(f"Seed data loaded into {args.db_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
