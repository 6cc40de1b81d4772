"""
Endpoints backed by the generative AI service.

These are plain (sync) handlers so the blocking HTTP call to the model runs
in the threadpool instead of on the event loop.
"""
from fastapi import APIRouter, Depends
from typing import List
import logging

from jezik.schemas.ai import (
    AiLesson,
    AiLessonCreate,
    GenerateAiLessonRequest,
    PronunciationRequest,
    PronunciationResponse,
    HintRequest,
    HintResponse,
)
from jezik.services import ai_service
from jezik.services.storage import Storage, get_storage
from jezik.api.v1.endpoints.utils import get_user_or_404

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ai"])


@router.post("/ai-lesson/generate", response_model=AiLesson)
def generate_ai_lesson(
    request: GenerateAiLessonRequest,
    storage: Storage = Depends(get_storage)
):
    """
    Generate a lesson with the LLM and store it for the user.

    Returns:
        The stored AI lesson, with the model's lesson object as content

    Raises:
        UpstreamError (500): If generation fails
    """
    if request.user_id:
        get_user_or_404(storage, request.user_id)

    content = ai_service.generate_ai_lesson(
        user_level=request.user_level,
        completed_topics=request.completed_topics,
        preferred_exercise_types=request.preferred_exercise_types
    )

    ai_lesson = storage.create_ai_lesson(AiLessonCreate(
        user_id=request.user_id,
        title=str(content['title']),
        content=content,
        difficulty=request.user_level,
    ))
    logger.info(f"Generated AI lesson {ai_lesson.id} '{ai_lesson.title}' for user {request.user_id}")
    return ai_lesson


@router.get("/user/{user_id}/ai-lessons", response_model=List[AiLesson])
def get_user_ai_lessons(
    user_id: str,
    storage: Storage = Depends(get_storage)
):
    """Get a user's AI lessons, newest first."""
    return storage.get_user_ai_lessons(user_id)


@router.post("/pronunciation/validate", response_model=PronunciationResponse)
def validate_pronunciation(request: PronunciationRequest):
    """Score a spoken attempt (speech-recognition transcript) against the Croatian original."""
    result = ai_service.validate_pronunciation(request.original_text, request.spoken_text)
    return PronunciationResponse.model_validate(result)


@router.post("/hint/generate", response_model=HintResponse)
def generate_hint(request: HintRequest):
    """Generate a hint for an exercise. Always answers, falling back to a stock hint."""
    hint = ai_service.generate_hint(
        exercise_type=request.exercise_type,
        question=request.question,
        croatian_text=request.croatian_text,
        english_text=request.english_text
    )
    return HintResponse(hint=hint)
