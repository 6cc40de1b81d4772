"""
Exercise model.
"""
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, JSON
from typing import Optional, List


class Exercise(SQLModel, table=True):
    """Exercise table - graded questions belonging to a lesson."""
    __tablename__ = "exercise"

    id: str = Field(primary_key=True)
    lesson_id: Optional[int] = Field(default=None, foreign_key="lesson.id", index=True)
    type: str  # 'translation', 'multiple-choice', 'listening', 'speaking' or 'word-bank'
    question: str
    croatian_text: Optional[str] = None
    english_text: Optional[str] = None
    audio_url: Optional[str] = None
    options: Optional[List[str]] = Field(default=None, sa_column=Column(JSON, nullable=True))
    correct_answer: str
    hints: Optional[List[str]] = Field(default=None, sa_column=Column(JSON, nullable=True))
    order: int
