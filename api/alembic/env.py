from alembic import context
from sqlmodel import SQLModel
from jezik.core.config import settings
from jezik.core.database import create_db_engine

# Import all models here so Alembic can detect them
from jezik.models.models import (  # noqa: F401
    User,
    Lesson,
    Exercise,
    UserProgress,
    AiLesson,
)

# this is the Alembic Config object
config = context.config

if not settings.database_url:
    raise ValueError("DATABASE_URL environment variable is required to run migrations")

# Set the sqlalchemy.url from our settings (postgres:// normalized to postgresql://)
db_url = settings.sqlalchemy_database_url
config.set_main_option("sqlalchemy.url", db_url)

# Import metadata for autogenerate
target_metadata = SQLModel.metadata


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode."""
    connectable = create_db_engine(db_url)

    with connectable.connect() as connection:
        context.configure(
            connection=connection, target_metadata=target_metadata
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
