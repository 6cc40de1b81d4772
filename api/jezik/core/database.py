from sqlmodel import SQLModel, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
import logging

logger = logging.getLogger(__name__)


def create_db_engine(db_url: str) -> Engine:
    """
    Create the database engine for the given URL.

    SQLite URLs get a single shared connection so that in-memory databases
    survive across sessions; anything else gets a small pre-pinged pool.

    Args:
        db_url: SQLAlchemy database URL (postgresql:// or sqlite://)

    Returns:
        SQLAlchemy engine
    """
    if db_url.startswith("postgres://"):
        # SQLAlchemy prefers postgresql:// over postgres://
        db_url = db_url.replace("postgres://", "postgresql://", 1)

    logger.info(f"Connecting to database: {db_url[:20]}...")  # Log partial URL for debugging

    if db_url.startswith("sqlite"):
        return create_engine(
            db_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    return create_engine(
        db_url,
        echo=False,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=5,
        max_overflow=10,
    )


def init_db(engine: Engine):
    """Initialize database tables."""
    # Import models to register them with SQLModel
    from jezik.models import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
