from pydantic import Field, EmailStr, field_validator
from typing import Optional, List

from jezik.schemas.utils import CamelModel, UtcDatetime, dedupe_preserving_order

MAX_HEARTS = 5


class User(CamelModel):
    """Learner snapshot as stored and served."""
    id: str
    username: str
    email: str
    hearts: int = Field(5, ge=0, le=MAX_HEARTS)
    xp: int = Field(0, ge=0)
    streak: int = Field(0, ge=0)
    gems: int = Field(500, ge=0)
    last_activity_date: Optional[str] = None
    current_lesson_id: Optional[int] = 1
    completed_lessons: List[int] = Field(default_factory=list)
    achievements: List[str] = Field(default_factory=list)
    created_at: Optional[UtcDatetime] = None


class UserCreate(CamelModel):
    """Request to create a learner; progression fields start from defaults."""
    username: str = Field(..., min_length=3, max_length=50, description="Username")
    email: EmailStr = Field(..., description="Email address")


class UserUpdate(CamelModel):
    """
    Partial learner update.

    Only fields present in the request body are applied (absent fields are
    preserved). An explicit null clears ``lastActivityDate`` or
    ``currentLessonId``; null for any other field is rejected.
    """
    username: Optional[str] = Field(None, min_length=3, max_length=50)
    email: Optional[EmailStr] = None
    hearts: Optional[int] = Field(None, ge=0, le=MAX_HEARTS)
    xp: Optional[int] = Field(None, ge=0)
    streak: Optional[int] = Field(None, ge=0)
    gems: Optional[int] = Field(None, ge=0)
    last_activity_date: Optional[str] = None
    current_lesson_id: Optional[int] = None
    completed_lessons: Optional[List[int]] = None
    achievements: Optional[List[str]] = None

    @field_validator('completed_lessons')
    @classmethod
    def validate_completed_lessons(cls, v):
        """completedLessons has set semantics."""
        return dedupe_preserving_order(v)


# Fields that may be cleared with an explicit null
NULLABLE_USER_FIELDS = {'last_activity_date', 'current_lesson_id'}


class PurchaseRequest(CamelModel):
    """Request to buy a shop item."""
    item_id: str = Field(..., min_length=1, description="Shop item id (e.g. 'refill-hearts')")
