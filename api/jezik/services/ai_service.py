"""
AI service: lesson generation, pronunciation scoring and hints.

Results are passed through from the model with only light checks (valid
JSON, expected top-level shape). No retries; lesson and pronunciation
failures surface as UpstreamError, hint failures fall back to a stock hint.
"""
import logging
from typing import Optional, List, Dict, Any

from jezik.core.exceptions import UpstreamError
from jezik.services import llm_service
from jezik.services.prompt_service import (
    generate_ai_lesson_prompt,
    generate_pronunciation_prompt,
    generate_hint_prompt,
)

logger = logging.getLogger(__name__)


PRONUNCIATION_PASS_SCORE = 70
EMPTY_HINT_FALLBACK = "Try breaking down the sentence word by word!"
FAILED_HINT_FALLBACK = "Try your best! You can do this!"


def generate_ai_lesson(
    user_level: str,
    completed_topics: List[str],
    preferred_exercise_types: List[str]
) -> Dict[str, Any]:
    """
    Generate a lesson with the LLM.

    Returns:
        Lesson content dict with 'title', 'description' and 'exercises'

    Raises:
        UpstreamError: If the call fails or the reply is not a lesson object
    """
    system_instruction, prompt = generate_ai_lesson_prompt(
        user_level=user_level,
        completed_topics=completed_topics,
        preferred_exercise_types=preferred_exercise_types
    )

    try:
        content = llm_service.call_gemini_api(prompt, system_instruction=system_instruction)
        if not isinstance(content, dict) or not content.get('title'):
            raise UpstreamError("LLM response is not a lesson object with a title")
    except UpstreamError as e:
        raise UpstreamError(f"Failed to generate AI lesson: {str(e)}") from e

    if not isinstance(content.get('exercises'), list):
        content['exercises'] = []

    return content


def clamp_score(value: Any) -> int:
    """Coerce a model-reported score to an int in [0, 100]."""
    try:
        score = int(round(float(value)))
    except (TypeError, ValueError):
        raise UpstreamError(f"LLM returned a non-numeric score: {value!r}")
    return max(0, min(100, score))


def validate_pronunciation(original_text: str, spoken_text: str) -> Dict[str, Any]:
    """
    Score a spoken attempt against the original Croatian text.

    The pass/fail flag is recomputed from the clamped score rather than taken
    from the model.

    Returns:
        Dict with 'score' (0-100), 'feedback' and 'isCorrect'

    Raises:
        UpstreamError: If the call fails or the reply has no usable score
    """
    system_instruction, prompt = generate_pronunciation_prompt(original_text, spoken_text)

    try:
        result = llm_service.call_gemini_api(prompt, system_instruction=system_instruction)
        if not isinstance(result, dict):
            raise UpstreamError("LLM response is not an object")
        score = clamp_score(result.get('score'))
    except UpstreamError as e:
        raise UpstreamError(f"Failed to validate pronunciation: {str(e)}") from e

    return {
        'score': score,
        'feedback': str(result.get('feedback') or ''),
        'isCorrect': score >= PRONUNCIATION_PASS_SCORE,
    }


def generate_hint(
    exercise_type: str,
    question: str,
    croatian_text: Optional[str] = None,
    english_text: Optional[str] = None
) -> str:
    """
    Generate a hint for an exercise. Never raises.

    Returns:
        The model's hint, or a stock hint if the reply is empty or the call fails
    """
    system_instruction, prompt = generate_hint_prompt(
        exercise_type=exercise_type,
        question=question,
        croatian_text=croatian_text,
        english_text=english_text
    )

    try:
        hint = llm_service.call_gemini_api(prompt, system_instruction=system_instruction, json_response=False)
    except Exception as e:
        logger.warning(f"Hint generation failed, using fallback hint: {type(e).__name__}: {str(e)}")
        return FAILED_HINT_FALLBACK

    return hint or EMPTY_HINT_FALLBACK
