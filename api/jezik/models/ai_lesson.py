"""
AiLesson model.
"""
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, DateTime, JSON
from typing import Optional, Dict, Any
from datetime import datetime, timezone


class AiLesson(SQLModel, table=True):
    """AiLesson table - lessons produced by the generative AI service."""
    __tablename__ = "ai_lesson"

    id: str = Field(primary_key=True)
    user_id: Optional[str] = Field(default=None, foreign_key="user.id", index=True)
    title: str
    content: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON, nullable=True))
    difficulty: str  # 'beginner', 'intermediate' or 'advanced'
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_column=Column(DateTime(timezone=True), nullable=False)
    )
