"""
Models module - re-exports all table models.

Import from here so that every table is registered with SQLModel.metadata:
    from jezik.models.models import User
"""
from jezik.models.user import User
from jezik.models.lesson import Lesson
from jezik.models.exercise import Exercise
from jezik.models.user_progress import UserProgress
from jezik.models.ai_lesson import AiLesson

__all__ = [
    'User',
    'Lesson',
    'Exercise',
    'UserProgress',
    'AiLesson',
]
