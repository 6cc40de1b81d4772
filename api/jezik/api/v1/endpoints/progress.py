from fastapi import APIRouter, Depends
from typing import List

from jezik.schemas.progress import ProgressCreate, UserProgress
from jezik.services.storage import Storage, get_storage
from jezik.api.v1.endpoints.utils import get_user_or_404, get_lesson_or_404, get_exercise_or_404

router = APIRouter(tags=["progress"])


@router.post("/progress", response_model=UserProgress)
async def record_progress(
    progress: ProgressCreate,
    storage: Storage = Depends(get_storage)
):
    """
    Record a progress entry; completedAt is stamped when isCompleted is true.

    Referenced user, lesson and exercise must exist (404 otherwise).
    """
    if progress.user_id is not None:
        get_user_or_404(storage, progress.user_id)
    if progress.lesson_id is not None:
        get_lesson_or_404(storage, progress.lesson_id)
    if progress.exercise_id is not None:
        get_exercise_or_404(storage, progress.exercise_id)
    return storage.update_progress(progress)


@router.get("/user/{user_id}/progress/{lesson_id}", response_model=List[UserProgress])
async def get_user_progress(
    user_id: str,
    lesson_id: int,
    storage: Storage = Depends(get_storage)
):
    """Get a learner's progress records for one lesson."""
    return storage.get_user_progress(user_id, lesson_id)
