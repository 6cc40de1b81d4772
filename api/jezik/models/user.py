"""
User model.
"""
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, DateTime, JSON
from typing import Optional, List
from datetime import datetime, timezone


class User(SQLModel, table=True):
    """User table - stores the learner's progression record."""
    __tablename__ = "user"

    id: str = Field(primary_key=True)  # Opaque id (uuid4 or 'default-user')
    username: str = Field(unique=True, index=True)
    email: str = Field(unique=True, index=True)

    # Progression fields
    hearts: int = Field(default=5)
    xp: int = Field(default=0)
    streak: int = Field(default=0)
    gems: int = Field(default=500)
    last_activity_date: Optional[str] = Field(default=None)
    current_lesson_id: Optional[int] = Field(default=1)
    completed_lessons: List[int] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    achievements: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_column=Column(DateTime(timezone=True), nullable=True)
    )
