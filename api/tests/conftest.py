"""
Pytest configuration and shared fixtures.
"""
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add the api directory to path so `jezik` imports without an install
API_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(API_DIR))

from jezik.core.database import create_db_engine  # noqa: E402
from jezik.main import app  # noqa: E402
from jezik.schemas.exercise import Exercise  # noqa: E402
from jezik.schemas.lesson import Lesson  # noqa: E402
from jezik.schemas.user import User  # noqa: E402
from jezik.services.catalog_service import seed_catalog  # noqa: E402
from jezik.services.storage import MemoryStorage, DatabaseStorage, get_storage  # noqa: E402


@pytest.fixture
def storage():
    """Memory storage with the default learner and the base catalog."""
    memory = MemoryStorage()
    seed_catalog(memory)
    return memory


@pytest.fixture
def db_storage():
    """Database storage on a private in-memory SQLite database, seeded like production."""
    engine = create_db_engine("sqlite:///:memory:")
    database = DatabaseStorage(engine)
    seed_catalog(database)
    yield database
    engine.dispose()


@pytest.fixture
def client(storage):
    """
    API client wired to the memory storage fixture.

    The startup event is not run (no context manager), so the app never builds
    its own storage.
    """
    app.dependency_overrides[get_storage] = lambda: storage
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def learner():
    """A fresh learner who has completed nothing yet."""
    return User(
        id="learner-1",
        username="ana",
        email="ana@jezik.hr",
        hearts=5,
        xp=0,
        streak=0,
        gems=500,
        current_lesson_id=1,
        completed_lessons=[],
        achievements=[],
    )


def make_lesson(lesson_id: int, xp_reward: int = 10, unit: int = 1) -> Lesson:
    return Lesson(
        id=lesson_id,
        title=f"Lesson {lesson_id}",
        unit=unit,
        order=lesson_id,
        xp_reward=xp_reward,
    )


def make_exercise(correct_answer: str, exercise_type: str = "translation") -> Exercise:
    return Exercise(
        id="exercise-1",
        lesson_id=1,
        type=exercise_type,
        question="Translate",
        correct_answer=correct_answer,
        order=1,
    )


@pytest.fixture
def db_client(db_storage):
    """API client wired to the SQLite database storage fixture."""
    app.dependency_overrides[get_storage] = lambda: db_storage
    yield TestClient(app)
    app.dependency_overrides.clear()
