"""
Storage interface shared by the memory and database backends.

Backends return schema objects (never live rows or internal references), and
return None for missing entities; raising NotFoundError is the caller's job.
Updates are read-modify-write on the whole record, so concurrent writers for
the same learner race and the last write wins.
"""
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Optional, List, Dict, Any

from jezik.data.lessons import DEFAULT_USER
from jezik.schemas.ai import AiLesson, AiLessonCreate
from jezik.schemas.exercise import Exercise, ExerciseCreate
from jezik.schemas.lesson import Lesson
from jezik.schemas.progress import UserProgress, ProgressCreate
from jezik.schemas.user import User, UserCreate

# Fields a partial update may never touch
IMMUTABLE_USER_FIELDS = {'id', 'created_at'}


def new_id() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class Storage(ABC):
    """CRUD facade over users, the lesson catalog, progress records and AI lessons."""

    # User methods
    @abstractmethod
    def get_user(self, user_id: str) -> Optional[User]:
        ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[User]:
        ...

    @abstractmethod
    def put_user(self, user: User) -> User:
        """Insert or replace a whole learner record."""
        ...

    @abstractmethod
    def update_user(self, user_id: str, updates: Dict[str, Any]) -> Optional[User]:
        """
        Merge a partial update into a learner record.

        Keys present in ``updates`` overwrite, everything else is preserved.
        Returns None if the learner does not exist.
        """
        ...

    # Lesson methods
    @abstractmethod
    def get_all_lessons(self) -> List[Lesson]:
        ...

    @abstractmethod
    def get_lesson(self, lesson_id: int) -> Optional[Lesson]:
        ...

    @abstractmethod
    def get_lessons_by_unit(self, unit: int) -> List[Lesson]:
        ...

    @abstractmethod
    def create_lesson(self, lesson: Lesson) -> Lesson:
        """Insert or replace a lesson by id."""
        ...

    # Exercise methods
    @abstractmethod
    def get_exercises_by_lesson_id(self, lesson_id: int) -> List[Exercise]:
        ...

    @abstractmethod
    def get_exercise(self, exercise_id: str) -> Optional[Exercise]:
        ...

    @abstractmethod
    def create_exercise(self, exercise: ExerciseCreate) -> Exercise:
        ...

    # Progress methods
    @abstractmethod
    def get_user_progress(self, user_id: str, lesson_id: int) -> List[UserProgress]:
        ...

    @abstractmethod
    def update_progress(self, progress: ProgressCreate) -> UserProgress:
        """Append a progress record; completed_at is stamped iff is_completed."""
        ...

    # AI lesson methods
    @abstractmethod
    def get_user_ai_lessons(self, user_id: str) -> List[AiLesson]:
        """AI lessons of a user, newest first."""
        ...

    @abstractmethod
    def create_ai_lesson(self, lesson: AiLessonCreate) -> AiLesson:
        ...

    # Shared behaviour
    def create_user(self, user: UserCreate) -> User:
        """Create a learner with fresh progression defaults."""
        new_user = User(
            id=new_id(),
            username=user.username,
            email=str(user.email),
            hearts=5,
            xp=0,
            streak=0,
            gems=500,
            last_activity_date=None,
            current_lesson_id=1,
            completed_lessons=[],
            achievements=[],
            created_at=utc_now(),
        )
        return self.put_user(new_user)

    def save_user(self, user: User) -> Optional[User]:
        """Persist a full learner snapshot (e.g. one returned by the progression service)."""
        return self.update_user(user.id, user.model_dump(exclude=IMMUTABLE_USER_FIELDS))

    def seed_default_user(self) -> User:
        """Create the default learner unless it already exists."""
        existing = self.get_user(DEFAULT_USER["id"])
        if existing is not None:
            return existing
        return self.put_user(User(
            **DEFAULT_USER,
            last_activity_date=utc_now().isoformat(),
            created_at=utc_now(),
        ))
