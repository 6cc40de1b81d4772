"""
Catalog service for loading the base lessons and exercises into storage.
"""
import logging
from typing import Dict

from jezik.data.lessons import BASE_LESSONS, BASE_EXERCISES
from jezik.schemas.exercise import ExerciseCreate
from jezik.schemas.lesson import Lesson
from jezik.services.storage.base import Storage

logger = logging.getLogger(__name__)


def seed_catalog(storage: Storage) -> Dict[str, int]:
    """
    Load the base catalog into storage.

    Lessons are upserted by id. Exercises are only created for lessons that
    have none yet, so restarting against a persistent backend does not
    duplicate them.

    Args:
        storage: Storage to seed

    Returns:
        Dict with counts: {'lessons_upserted': int, 'exercises_created': int}
    """
    for lesson_data in BASE_LESSONS:
        storage.create_lesson(Lesson(**lesson_data))

    lesson_ids = {exercise_data["lesson_id"] for exercise_data in BASE_EXERCISES}
    lessons_to_fill = {
        lesson_id for lesson_id in lesson_ids
        if not storage.get_exercises_by_lesson_id(lesson_id)
    }

    exercises_created = 0
    for exercise_data in BASE_EXERCISES:
        if exercise_data["lesson_id"] in lessons_to_fill:
            storage.create_exercise(ExerciseCreate(**exercise_data))
            exercises_created += 1

    logger.info(
        f"Seeded catalog: {len(BASE_LESSONS)} lessons upserted, "
        f"{exercises_created} exercises created"
    )

    return {
        'lessons_upserted': len(BASE_LESSONS),
        'exercises_created': exercises_created,
    }
