"""
UserProgress model.
"""
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, DateTime
from typing import Optional
from datetime import datetime


class UserProgress(SQLModel, table=True):
    """UserProgress table - one record per reported attempt batch."""
    __tablename__ = "user_progress"

    id: str = Field(primary_key=True)
    user_id: Optional[str] = Field(default=None, foreign_key="user.id", index=True)
    lesson_id: Optional[int] = Field(default=None, foreign_key="lesson.id", index=True)
    exercise_id: Optional[str] = Field(default=None, foreign_key="exercise.id")
    is_completed: bool = Field(default=False)
    attempts: int = Field(default=0)
    correct_attempts: int = Field(default=0)
    completed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime(timezone=True), nullable=True))
