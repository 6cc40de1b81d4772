"""
Script to copy the in-memory seed data into the database backend.

Builds a MemoryStorage holding the default learner and the base catalog, then
merges every record into the database at DATABASE_URL. Existing rows with the
same ids are overwritten, nothing else is touched. Point it at a database the
API has not seeded yet, since seeded exercises carry different ids.

Run from the api directory:
    DATABASE_URL=postgresql://... python scripts/migrate_to_database.py
"""
import sys
import logging
from pathlib import Path

# Add the api directory to Python path so we can import from jezik
script_dir = Path(__file__).parent
api_dir = script_dir.parent
sys.path.insert(0, str(api_dir))

from jezik.core.config import settings
from jezik.core.database import create_db_engine
from jezik.services.catalog_service import seed_catalog
from jezik.services.storage import MemoryStorage, DatabaseStorage

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def main():
    if not settings.database_url:
        logger.error("DATABASE_URL is not set")
        sys.exit(1)

    logger.info("Loading seed data into memory storage...")
    memory = MemoryStorage()
    seed_catalog(memory)

    # seed=False so the learner comes from the memory snapshot, not a fresh default
    database = DatabaseStorage(create_db_engine(settings.sqlalchemy_database_url), seed=False)

    try:
        counts = database.migrate_from_memory(memory)
    except Exception as e:
        logger.error(f"Migration failed: {str(e)}", exc_info=True)
        sys.exit(1)

    for kind, count in counts.items():
        logger.info(f"Migrated {count} {kind.replace('_', ' ')}")

    logger.info("Migration completed. Set STORAGE_BACKEND=database and restart the API to use it.")


if __name__ == "__main__":
    main()
