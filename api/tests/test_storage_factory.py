import pytest

from jezik.core.config import Settings
from jezik.data.lessons import DEFAULT_USER
from jezik.services.catalog_service import seed_catalog
from jezik.services.storage import MemoryStorage, DatabaseStorage, create_storage
from jezik.core.database import create_db_engine


def test_memory_backend_is_default():
    storage = create_storage(Settings(storage_backend="memory"))
    assert isinstance(storage, MemoryStorage)
    assert storage.get_user(DEFAULT_USER["id"]) is not None


def test_database_backend(tmp_path):
    db_path = tmp_path / "jezik.db"
    storage = create_storage(Settings(storage_backend="database", database_url=f"sqlite:///{db_path}"))
    assert isinstance(storage, DatabaseStorage)
    assert storage.get_user(DEFAULT_USER["id"]) is not None


def test_database_backend_requires_url(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(ValueError, match="DATABASE_URL"):
        create_storage(Settings(storage_backend="database", database_url=""))


def test_unknown_backend():
    with pytest.raises(ValueError, match="Unknown storage backend"):
        create_storage(Settings(storage_backend="firestore"))


def test_postgres_scheme_is_normalized():
    settings = Settings(database_url="postgres://user:secret@db:5432/jezik")
    assert settings.sqlalchemy_database_url == "postgresql://user:secret@db:5432/jezik"


def test_migrate_memory_into_database():
    memory = MemoryStorage()
    seed_catalog(memory)
    memory.update_user(DEFAULT_USER["id"], {"xp": 1300})

    database = DatabaseStorage(create_db_engine("sqlite:///:memory:"), seed=False)
    counts = database.migrate_from_memory(memory)

    assert counts['users'] == 1
    assert counts['lessons'] == 50
    assert database.get_user(DEFAULT_USER["id"]).xp == 1300
    memory_ids = [exercise.id for exercise in memory.get_exercises_by_lesson_id(1)]
    assert [exercise.id for exercise in database.get_exercises_by_lesson_id(1)] == memory_ids

    # Merging again overwrites instead of duplicating
    database.migrate_from_memory(memory)
    assert len(database.get_exercises_by_lesson_id(1)) == 5
