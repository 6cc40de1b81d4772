"""
Exercise and attempt schemas.
"""
from pydantic import Field
from typing import Optional, List, Literal

from jezik.schemas.user import User
from jezik.schemas.utils import CamelModel

ExerciseType = Literal['translation', 'multiple-choice', 'listening', 'speaking', 'word-bank']


class ExerciseCreate(CamelModel):
    """Exercise definition without an id."""
    lesson_id: Optional[int] = None
    type: ExerciseType
    question: str
    croatian_text: Optional[str] = None
    english_text: Optional[str] = None
    audio_url: Optional[str] = None
    options: Optional[List[str]] = None
    correct_answer: str = Field(..., min_length=1)
    hints: Optional[List[str]] = None
    order: int


class Exercise(ExerciseCreate):
    """Immutable exercise catalog entry."""
    id: str

    class Config:
        frozen = True


class AttemptRequest(CamelModel):
    """
    A learner's answer to one exercise.

    Word-bank exercises may send the chosen words as ``selection`` instead of
    a pre-joined ``answer``.
    """
    user_id: str = Field(..., min_length=1)
    answer: str = ""
    selection: Optional[List[str]] = None


class AttemptResponse(CamelModel):
    """Verdict for one attempt plus the updated learner."""
    verdict: str
    is_correct: bool
    correct_answer: str
    xp_earned: int
    user: User
