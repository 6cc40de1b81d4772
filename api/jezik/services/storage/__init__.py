"""
Storage backends and the factory that picks one at startup.
"""
import logging

from fastapi import Request

from jezik.core.config import Settings, STORAGE_BACKENDS
from jezik.core.database import create_db_engine
from jezik.services.storage.base import Storage
from jezik.services.storage.memory import MemoryStorage
from jezik.services.storage.database import DatabaseStorage

logger = logging.getLogger(__name__)


def create_storage(settings: Settings) -> Storage:
    """
    Create the storage backend selected by STORAGE_BACKEND.

    Args:
        settings: Application settings

    Returns:
        A seeded storage instance, meant to live for the whole process

    Raises:
        ValueError: If the backend is unknown or the database backend has no DATABASE_URL
    """
    backend = settings.storage_backend.lower()

    if backend == "memory":
        logger.info("Using in-memory storage")
        return MemoryStorage()

    if backend == "database":
        if not settings.database_url:
            raise ValueError("DATABASE_URL environment variable is required for the database storage backend")
        logger.info("Using database storage")
        return DatabaseStorage(create_db_engine(settings.sqlalchemy_database_url))

    raise ValueError(
        f"Unknown storage backend '{settings.storage_backend}', expected one of: {', '.join(STORAGE_BACKENDS)}"
    )


def get_storage(request: Request) -> Storage:
    """Dependency for getting the process-wide storage."""
    return request.app.state.storage


__all__ = [
    'Storage',
    'MemoryStorage',
    'DatabaseStorage',
    'create_storage',
    'get_storage',
]
