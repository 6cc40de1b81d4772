"""
Schemas for the generative AI endpoints.
"""
from pydantic import Field
from typing import Optional, List, Dict, Any

from jezik.schemas.utils import CamelModel, UtcDatetime


class AiLessonCreate(CamelModel):
    """AI lesson to store."""
    user_id: Optional[str] = None
    title: str
    content: Optional[Dict[str, Any]] = None
    difficulty: str


class AiLesson(AiLessonCreate):
    """Stored AI lesson."""
    id: str
    created_at: UtcDatetime



class GenerateAiLessonRequest(CamelModel):
    """Request to generate an AI lesson."""
    user_id: Optional[str] = None
    user_level: str = Field("beginner", description="'beginner', 'intermediate' or 'advanced'")
    completed_topics: List[str] = Field(default_factory=list)
    preferred_exercise_types: List[str] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "userId": "default-user",
                "userLevel": "beginner",
                "completedTopics": ["Greetings", "Family"],
                "preferredExerciseTypes": ["translation", "multiple-choice"]
            }
        }


class PronunciationRequest(CamelModel):
    """Request to score a spoken attempt against the original Croatian text."""
    original_text: str = Field(..., min_length=1)
    spoken_text: str = ""


class PronunciationResponse(CamelModel):
    """Pronunciation score and feedback."""
    score: int = Field(..., ge=0, le=100)
    feedback: str
    is_correct: bool


class HintRequest(CamelModel):
    """Request for a hint on an exercise."""
    exercise_type: str
    question: str
    croatian_text: Optional[str] = None
    english_text: Optional[str] = None


class HintResponse(CamelModel):
    """Generated hint."""
    hint: str
