"""
Lesson model.
"""
from sqlmodel import SQLModel, Field
from typing import Optional


class Lesson(SQLModel, table=True):
    """Lesson table - immutable catalog entries of the lesson map."""
    __tablename__ = "lesson"

    id: int = Field(primary_key=True, sa_column_kwargs={"autoincrement": False})
    title: str
    description: Optional[str] = None
    unit: int = Field(index=True)
    order: int
    is_locked: bool = Field(default=True)  # Static hint only, unlocks are derived per learner
    xp_reward: int = Field(default=10)
    type: str  # Lesson type: 'base' or 'ai-generated'
