from pydantic import Field
from typing import Optional

from jezik.schemas.utils import CamelModel, UtcDatetime


class ProgressCreate(CamelModel):
    """Progress record submitted by the client or written after an attempt."""
    user_id: Optional[str] = None
    lesson_id: Optional[int] = None
    exercise_id: Optional[str] = None
    is_completed: bool = False
    attempts: int = Field(0, ge=0)
    correct_attempts: int = Field(0, ge=0)


class UserProgress(ProgressCreate):
    """Stored progress record."""
    id: str
    completed_at: Optional[UtcDatetime] = None

