"""
Database storage backend (SQLModel).

List and JSON fields (completed_lessons, achievements, options, hints, AI
lesson content) live in JSON columns, so each row holds the whole document.
Every call opens its own short-lived session.
"""
import logging
from typing import Optional, List, Dict, Any

from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from jezik.core.database import init_db
from jezik.core.exceptions import ConflictError
from jezik.models.models import (
    User as UserRow,
    Lesson as LessonRow,
    Exercise as ExerciseRow,
    UserProgress as UserProgressRow,
    AiLesson as AiLessonRow,
)
from jezik.schemas.ai import AiLesson, AiLessonCreate
from jezik.schemas.exercise import Exercise, ExerciseCreate
from jezik.schemas.lesson import Lesson
from jezik.schemas.progress import UserProgress, ProgressCreate
from jezik.schemas.user import User
from jezik.services.storage.base import Storage, IMMUTABLE_USER_FIELDS, new_id, utc_now
from jezik.services.storage.memory import MemoryStorage

logger = logging.getLogger(__name__)


class DatabaseStorage(Storage):
    """Storage backed by a SQL database through SQLModel."""

    def __init__(self, engine: Engine, seed: bool = True):
        self.engine = engine
        init_db(engine)

        if seed:
            self.seed_default_user()

    def _commit(self, session: Session, what: str) -> None:
        try:
            session.commit()
        except IntegrityError as e:
            session.rollback()
            logger.warning(f"Integrity error while saving {what}: {str(e.orig)}")
            raise ConflictError(f"{what} conflicts with an existing record") from e

    # Users

    def get_user(self, user_id: str) -> Optional[User]:
        with Session(self.engine) as session:
            row = session.get(UserRow, user_id)
            return User.model_validate(row) if row else None

    def get_user_by_username(self, username: str) -> Optional[User]:
        with Session(self.engine) as session:
            row = session.exec(select(UserRow).where(UserRow.username == username)).first()
            return User.model_validate(row) if row else None

    def put_user(self, user: User) -> User:
        with Session(self.engine) as session:
            row = session.merge(UserRow(**user.model_dump()))
            self._commit(session, f"User {user.id}")
            session.refresh(row)
            return User.model_validate(row)

    def update_user(self, user_id: str, updates: Dict[str, Any]) -> Optional[User]:
        with Session(self.engine) as session:
            row = session.get(UserRow, user_id)
            if not row:
                return None

            for field, value in updates.items():
                if field in IMMUTABLE_USER_FIELDS:
                    continue
                # New list objects so JSON columns are flagged dirty
                setattr(row, field, list(value) if isinstance(value, list) else value)

            session.add(row)
            self._commit(session, f"User {user_id}")
            session.refresh(row)
            return User.model_validate(row)

    # Lessons

    def get_all_lessons(self) -> List[Lesson]:
        with Session(self.engine) as session:
            rows = session.exec(select(LessonRow).order_by(LessonRow.order)).all()
            return [Lesson.model_validate(row) for row in rows]

    def get_lesson(self, lesson_id: int) -> Optional[Lesson]:
        with Session(self.engine) as session:
            row = session.get(LessonRow, lesson_id)
            return Lesson.model_validate(row) if row else None

    def get_lessons_by_unit(self, unit: int) -> List[Lesson]:
        with Session(self.engine) as session:
            rows = session.exec(
                select(LessonRow).where(LessonRow.unit == unit).order_by(LessonRow.order)
            ).all()
            return [Lesson.model_validate(row) for row in rows]

    def create_lesson(self, lesson: Lesson) -> Lesson:
        with Session(self.engine) as session:
            session.merge(LessonRow(**lesson.model_dump()))
            self._commit(session, f"Lesson {lesson.id}")
            return lesson

    # Exercises

    def get_exercises_by_lesson_id(self, lesson_id: int) -> List[Exercise]:
        with Session(self.engine) as session:
            rows = session.exec(
                select(ExerciseRow).where(ExerciseRow.lesson_id == lesson_id).order_by(ExerciseRow.order)
            ).all()
            return [Exercise.model_validate(row) for row in rows]

    def get_exercise(self, exercise_id: str) -> Optional[Exercise]:
        with Session(self.engine) as session:
            row = session.get(ExerciseRow, exercise_id)
            return Exercise.model_validate(row) if row else None

    def create_exercise(self, exercise: ExerciseCreate) -> Exercise:
        with Session(self.engine) as session:
            row = ExerciseRow(id=new_id(), **exercise.model_dump())
            session.add(row)
            self._commit(session, "Exercise")
            session.refresh(row)
            return Exercise.model_validate(row)

    # Progress

    def get_user_progress(self, user_id: str, lesson_id: int) -> List[UserProgress]:
        with Session(self.engine) as session:
            rows = session.exec(
                select(UserProgressRow).where(
                    UserProgressRow.user_id == user_id,
                    UserProgressRow.lesson_id == lesson_id
                )
            ).all()
            return [UserProgress.model_validate(row) for row in rows]

    def update_progress(self, progress: ProgressCreate) -> UserProgress:
        with Session(self.engine) as session:
            row = UserProgressRow(
                id=new_id(),
                **progress.model_dump(),
                completed_at=utc_now() if progress.is_completed else None,
            )
            session.add(row)
            self._commit(session, "Progress record")
            session.refresh(row)
            return UserProgress.model_validate(row)

    # AI lessons

    def get_user_ai_lessons(self, user_id: str) -> List[AiLesson]:
        with Session(self.engine) as session:
            rows = session.exec(
                select(AiLessonRow)
                .where(AiLessonRow.user_id == user_id)
                .order_by(AiLessonRow.created_at.desc())  # type: ignore
            ).all()
            return [AiLesson.model_validate(row) for row in rows]

    def create_ai_lesson(self, lesson: AiLessonCreate) -> AiLesson:
        with Session(self.engine) as session:
            row = AiLessonRow(
                id=new_id(),
                **lesson.model_dump(),
                created_at=utc_now(),
            )
            session.add(row)
            self._commit(session, "AI lesson")
            session.refresh(row)
            return AiLesson.model_validate(row)

    # Migration

    def migrate_from_memory(self, memory: MemoryStorage) -> Dict[str, int]:
        """
        Copy everything held by an in-memory storage into the database.

        Records keep their ids and are merged, so running the migration twice
        overwrites rather than duplicates. Everything is written in one
        transaction.

        Args:
            memory: Source storage

        Returns:
            Dict with the number of records copied per kind
        """
        data = memory.snapshot()
        row_types = [
            ('users', UserRow),
            ('lessons', LessonRow),
            ('exercises', ExerciseRow),
            ('user_progress', UserProgressRow),
            ('ai_lessons', AiLessonRow),
        ]

        with Session(self.engine) as session:
            for kind, row_type in row_types:
                for record in data[kind]:
                    session.merge(row_type(**record.model_dump()))
            self._commit(session, "Migrated records")

        counts = {kind: len(data[kind]) for kind, _ in row_types}
        logger.info(f"Migrated memory storage to database: {counts}")
        return counts
