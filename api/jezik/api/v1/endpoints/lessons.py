"""
Lesson catalog and lesson completion endpoints.
"""
from fastapi import APIRouter, Depends
from typing import List
import logging

from jezik.schemas.exercise import Exercise
from jezik.schemas.lesson import Lesson, CompleteLessonRequest
from jezik.schemas.user import User
from jezik.services.progression_service import complete_lesson as apply_lesson_completion
from jezik.services.storage import Storage, get_storage
from jezik.api.v1.endpoints.utils import get_user_or_404, get_lesson_or_404

logger = logging.getLogger(__name__)

router = APIRouter(tags=["lessons"])


@router.get("/lessons", response_model=List[Lesson])
async def get_lessons(
    storage: Storage = Depends(get_storage)
):
    """Get all lessons ordered by their position on the lesson map."""
    return storage.get_all_lessons()


@router.get("/lessons/{lesson_id}", response_model=Lesson)
async def get_lesson(
    lesson_id: int,
    storage: Storage = Depends(get_storage)
):
    """Get a single lesson."""
    return get_lesson_or_404(storage, lesson_id)


@router.get("/lessons/{lesson_id}/exercises", response_model=List[Exercise])
async def get_lesson_exercises(
    lesson_id: int,
    storage: Storage = Depends(get_storage)
):
    """Get the exercises of a lesson in order. Unknown lessons have no exercises."""
    return storage.get_exercises_by_lesson_id(lesson_id)


@router.post("/lesson/{lesson_id}/complete", response_model=User)
async def complete_lesson(
    lesson_id: int,
    request: CompleteLessonRequest,
    storage: Storage = Depends(get_storage)
):
    """
    Complete a lesson for a learner.

    Adds the lesson to completedLessons (once), pays out its xpReward and
    moves currentLessonId to the next lesson. XP is paid on every call, also
    for lessons that were already completed.

    Args:
        lesson_id: Lesson being completed
        request: CompleteLessonRequest with the user id

    Returns:
        The updated learner
    """
    user = get_user_or_404(storage, request.user_id)
    lesson = get_lesson_or_404(storage, lesson_id)

    updated_user = storage.save_user(apply_lesson_completion(lesson, user))

    logger.info(
        f"User {user.id} completed lesson {lesson.id}: "
        f"+{lesson.xp_reward} XP, now at lesson {updated_user.current_lesson_id}"
    )
    return updated_user
