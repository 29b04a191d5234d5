"""Create (or reset) the configured database schema for local development."""
from __future__ import annotations

import argparse
import logging

from reloc_community.core.settings import settings
from reloc_community.db.session import create_tables, drop_tables

logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Create the Reloc database tables")
    parser.add_argument(
        "--drop-tables",
        action="store_true",
        help="Drop every table before creating the schema again.",
    )
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level.upper())
    if args.drop_tables:
        drop_tables()
        logger.info("Dropped all tables")
    create_tables()
    logger.info("Database initialized at %s", settings.effective_database_url)


if __name__ == "__main__":
    main()
