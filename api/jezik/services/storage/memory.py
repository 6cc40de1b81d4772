"""
In-memory storage backend.

Everything lives in dicts owned by the instance for the lifetime of the
process. Objects are deep-copied on the way in and out, so callers can never
mutate stored state by accident.
"""
from typing import Optional, List, Dict, Any

from jezik.core.exceptions import ConflictError
from jezik.schemas.ai import AiLesson, AiLessonCreate
from jezik.schemas.exercise import Exercise, ExerciseCreate
from jezik.schemas.lesson import Lesson
from jezik.schemas.progress import UserProgress, ProgressCreate
from jezik.schemas.user import User
from jezik.services.storage.base import Storage, IMMUTABLE_USER_FIELDS, new_id, utc_now


class MemoryStorage(Storage):
    """Storage backed by process memory."""

    def __init__(self, seed: bool = True):
        self._users: Dict[str, User] = {}
        self._lessons: Dict[int, Lesson] = {}
        self._exercises: Dict[str, Exercise] = {}
        self._user_progress: Dict[str, UserProgress] = {}
        self._ai_lessons: Dict[str, AiLesson] = {}

        if seed:
            self.seed_default_user()

    # Users

    def _check_unique(self, user: User) -> None:
        for other in self._users.values():
            if other.id == user.id:
                continue
            if other.username == user.username:
                raise ConflictError(f"Username '{user.username}' already exists")
            if other.email == user.email:
                raise ConflictError(f"Email '{user.email}' already exists")

    def get_user(self, user_id: str) -> Optional[User]:
        user = self._users.get(user_id)
        return user.model_copy(deep=True) if user is not None else None

    def get_user_by_username(self, username: str) -> Optional[User]:
        for user in self._users.values():
            if user.username == username:
                return user.model_copy(deep=True)
        return None

    def put_user(self, user: User) -> User:
        self._check_unique(user)
        self._users[user.id] = user.model_copy(deep=True)
        return user.model_copy(deep=True)

    def update_user(self, user_id: str, updates: Dict[str, Any]) -> Optional[User]:
        user = self._users.get(user_id)
        if user is None:
            return None

        changes = {k: v for k, v in updates.items() if k not in IMMUTABLE_USER_FIELDS}
        updated_user = user.model_copy(update=changes, deep=True)
        self._check_unique(updated_user)
        self._users[user_id] = updated_user
        return updated_user.model_copy(deep=True)

    # Lessons

    def get_all_lessons(self) -> List[Lesson]:
        return sorted(self._lessons.values(), key=lambda lesson: lesson.order)

    def get_lesson(self, lesson_id: int) -> Optional[Lesson]:
        return self._lessons.get(lesson_id)

    def get_lessons_by_unit(self, unit: int) -> List[Lesson]:
        return sorted(
            (lesson for lesson in self._lessons.values() if lesson.unit == unit),
            key=lambda lesson: lesson.order
        )

    def create_lesson(self, lesson: Lesson) -> Lesson:
        # Lessons are frozen, no copy needed
        self._lessons[lesson.id] = lesson
        return lesson

    # Exercises

    def get_exercises_by_lesson_id(self, lesson_id: int) -> List[Exercise]:
        return sorted(
            (exercise for exercise in self._exercises.values() if exercise.lesson_id == lesson_id),
            key=lambda exercise: exercise.order
        )

    def get_exercise(self, exercise_id: str) -> Optional[Exercise]:
        return self._exercises.get(exercise_id)

    def create_exercise(self, exercise: ExerciseCreate) -> Exercise:
        new_exercise = Exercise(id=new_id(), **exercise.model_dump())
        self._exercises[new_exercise.id] = new_exercise
        return new_exercise

    # Progress

    def get_user_progress(self, user_id: str, lesson_id: int) -> List[UserProgress]:
        return [
            progress.model_copy()
            for progress in self._user_progress.values()
            if progress.user_id == user_id and progress.lesson_id == lesson_id
        ]

    def update_progress(self, progress: ProgressCreate) -> UserProgress:
        new_progress = UserProgress(
            id=new_id(),
            **progress.model_dump(),
            completed_at=utc_now() if progress.is_completed else None,
        )
        self._user_progress[new_progress.id] = new_progress
        return new_progress.model_copy()

    # AI lessons

    def get_user_ai_lessons(self, user_id: str) -> List[AiLesson]:
        lessons = [lesson for lesson in self._ai_lessons.values() if lesson.user_id == user_id]
        # Newest first; ties keep the most recently inserted first
        lessons.reverse()
        return [
            lesson.model_copy(deep=True)
            for lesson in sorted(lessons, key=lambda lesson: lesson.created_at, reverse=True)
        ]

    def create_ai_lesson(self, lesson: AiLessonCreate) -> AiLesson:
        new_lesson = AiLesson(
            id=new_id(),
            **lesson.model_dump(),
            created_at=utc_now(),
        )
        self._ai_lessons[new_lesson.id] = new_lesson
        return new_lesson.model_copy(deep=True)

    # Migration

    def snapshot(self) -> Dict[str, List[Any]]:
        """Copies of every stored record, grouped by kind, for copying into another backend."""
        return {
            'users': [user.model_copy(deep=True) for user in self._users.values()],
            'lessons': list(self._lessons.values()),
            'exercises': list(self._exercises.values()),
            'user_progress': [progress.model_copy() for progress in self._user_progress.values()],
            'ai_lessons': [lesson.model_copy(deep=True) for lesson in self._ai_lessons.values()],
        }
