"""
Exercise attempt endpoint.
"""
from fastapi import APIRouter, Depends
import logging

from jezik.schemas.exercise import AttemptRequest, AttemptResponse
from jezik.schemas.progress import ProgressCreate
from jezik.services.progression_service import (
    CORRECT_ANSWER_XP,
    Verdict,
    evaluate_attempt,
    join_word_bank,
)
from jezik.services.storage import Storage, get_storage
from jezik.api.v1.endpoints.utils import get_user_or_404, get_exercise_or_404

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/exercises", tags=["exercises"])


@router.post("/{exercise_id}/attempt", response_model=AttemptResponse)
async def attempt_exercise(
    exercise_id: str,
    request: AttemptRequest,
    storage: Storage = Depends(get_storage)
):
    """
    Grade an answer to an exercise and persist the result.

    A correct answer earns XP, a wrong one costs a heart (never below 0).
    Attempts are graded even when the learner has no hearts left.

    Args:
        exercise_id: Exercise being answered
        request: AttemptRequest with the user id and the answer (or word-bank selection)

    Returns:
        AttemptResponse with the verdict and the updated learner
    """
    exercise = get_exercise_or_404(storage, exercise_id)
    user = get_user_or_404(storage, request.user_id)

    answer = join_word_bank(request.selection) if request.selection is not None else request.answer
    verdict, next_user = evaluate_attempt(exercise, answer, user)
    is_correct = verdict == Verdict.CORRECT

    saved_user = storage.save_user(next_user)
    storage.update_progress(ProgressCreate(
        user_id=user.id,
        lesson_id=exercise.lesson_id,
        exercise_id=exercise.id,
        is_completed=is_correct,
        attempts=1,
        correct_attempts=1 if is_correct else 0,
    ))

    logger.info(
        f"User {user.id} answered exercise {exercise.id}: {verdict.value} "
        f"(hearts {user.hearts} -> {saved_user.hearts}, xp {user.xp} -> {saved_user.xp})"
    )

    return AttemptResponse(
        verdict=verdict.value,
        is_correct=is_correct,
        correct_answer=exercise.correct_answer,
        xp_earned=CORRECT_ANSWER_XP if is_correct else 0,
        user=saved_user,
    )
