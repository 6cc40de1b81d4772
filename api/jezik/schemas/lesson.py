"""
Lesson catalog and lesson completion schemas.
"""
from pydantic import Field
from typing import Optional

from jezik.schemas.utils import CamelModel


class Lesson(CamelModel):
    """Immutable lesson catalog entry."""
    id: int
    title: str
    description: Optional[str] = None
    unit: int
    order: int
    is_locked: bool = True
    xp_reward: int = Field(10, gt=0)
    type: str = "base"

    class Config:
        frozen = True


class LessonWithState(Lesson):
    """Lesson catalog entry with the learner-specific derived state."""
    state: str = Field(..., description="'locked', 'unlocked' or 'completed'")
    is_unlocked: bool


class CompleteLessonRequest(CamelModel):
    """Request to complete a lesson."""
    user_id: str = Field(..., min_length=1, description="User ID")

    class Config:
        json_schema_extra = {
            "example": {
                "userId": "default-user"
            }
        }
