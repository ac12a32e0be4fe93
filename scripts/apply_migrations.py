#!/usr/bin/env python3
"""
Migration script for the Clay Craft API.

Applies the SQL migrations under ``migrations/`` with yoyo, using the same
database settings as the application.
"""

import argparse
import logging
import sys

from pathlib import Path

from yoyo import get_backend
from yoyo import read_migrations

from claycraft_api.config.database import get_database_settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).parent.parent / "migrations"


def main() -> int:
    """Apply or roll back migrations."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--rollback",
        action="store_true",
        help="Roll back applied migrations instead of applying pending ones",
    )
    args = parser.parse_args()

    settings = get_database_settings()
    backend = get_backend(settings.dsn, migration_table=settings.migration_table)
    migrations = read_migrations(str(MIGRATIONS_DIR))

    with backend.lock():
        if args.rollback:
            to_rollback = backend.to_rollback(migrations)
            logger.info(f"Rolling back {len(to_rollback)} migration(s)")
            backend.rollback_migrations(to_rollback)
        else:
            to_apply = backend.to_apply(migrations)
            logger.info(f"Applying {len(to_apply)} migration(s)")
            backend.apply_migrations(to_apply)

    logger.info("Done")
    return 0


if __name__ == "__main__":
    sys.exit(main())
