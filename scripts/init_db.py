#!/usr/bin/env python3
"""
Initialize the FreshSave database
Creates tables and seeds recipes, food banks and nearby users into empty tables

Usage:
    python -m scripts.init_db
"""

import sys
import logging
from pathlib import Path

from sqlalchemy import inspect

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.config import settings  # noqa: E402
from domain.models import Database  # noqa: E402
from services.sharing_service import SharingService  # noqa: E402

logger = logging.getLogger("freshsave.init_db")


def init_schema(database: Database) -> None:
    """Create tables and report what exists afterwards"""
    database.init_schema()
    tables = inspect(database.engine).get_table_names()
    logger.info("Schema ready with %d tables: %s", len(tables), ", ".join(tables))


def seed(database: Database) -> dict:
    with database.session() as db:
        return SharingService.seed_reference_data(db)


def main() -> int:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()), format=settings.log_format
    )
    logger.info("=" * 60)
    logger.info("Initializing database (%s mode)", settings.environment.value)
    logger.info("=" * 60)

    database = Database(settings.database_url, echo=settings.db_echo)
    try:
        init_schema(database)
        seeded = seed(database)
    except Exception:
        logger.exception("Database initialization failed")
        return 1
    finally:
        database.dispose()

    for table, count in seeded.items():
        logger.info("Seeded %d rows into %s", count, table)
    logger.info("Database is ready to use")
    return 0


if __name__ == "__main__":
    sys.exit(main())
