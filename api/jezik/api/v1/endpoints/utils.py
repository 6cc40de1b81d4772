"""
Lookup helpers shared by the endpoints.
"""
from jezik.core.exceptions import NotFoundError
from jezik.schemas.exercise import Exercise
from jezik.schemas.lesson import Lesson
from jezik.schemas.user import User
from jezik.services.storage import Storage


def get_user_or_404(storage: Storage, user_id: str) -> User:
    user = storage.get_user(user_id)
    if not user:
        raise NotFoundError(f"User with id {user_id} not found")
    return user


def get_lesson_or_404(storage: Storage, lesson_id: int) -> Lesson:
    lesson = storage.get_lesson(lesson_id)
    if not lesson:
        raise NotFoundError(f"Lesson with id {lesson_id} not found")
    return lesson


def get_exercise_or_404(storage: Storage, exercise_id: str) -> Exercise:
    exercise = storage.get_exercise(exercise_id)
    if not exercise:
        raise NotFoundError(f"Exercise with id {exercise_id} not found")
    return exercise
