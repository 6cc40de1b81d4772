from fastapi import APIRouter, Depends, status
from pydantic.alias_generators import to_camel
from typing import List
import logging

from jezik.core.exceptions import ValidationError, ConflictError, NotFoundError
from jezik.schemas.lesson import LessonWithState
from jezik.schemas.user import User, UserCreate, UserUpdate, NULLABLE_USER_FIELDS
from jezik.services.progression_service import lesson_state, unlock_state
from jezik.services.storage import Storage, get_storage
from jezik.api.v1.endpoints.utils import get_user_or_404

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


@router.post("/users", response_model=User, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_data: UserCreate,
    storage: Storage = Depends(get_storage)
):
    """Create a learner with default hearts, XP, gems and lesson progress."""
    if storage.get_user_by_username(user_data.username):
        raise ConflictError(f"Username '{user_data.username}' already exists")

    user = storage.create_user(user_data)
    logger.info(f"Created user {user.id} ({user.username})")
    return user


@router.get("/user/{user_id}", response_model=User)
async def get_user(
    user_id: str,
    storage: Storage = Depends(get_storage)
):
    """Get a learner snapshot."""
    return get_user_or_404(storage, user_id)


@router.post("/user/{user_id}/update", response_model=User)
async def update_user(
    user_id: str,
    updates: UserUpdate,
    storage: Storage = Depends(get_storage)
):
    """
    Merge a partial update into a learner.

    Fields present in the body overwrite, absent fields are kept. Null is only
    accepted for lastActivityDate and currentLessonId.
    """
    changes = updates.model_dump(exclude_unset=True)

    null_fields = [
        field for field, value in changes.items()
        if value is None and field not in NULLABLE_USER_FIELDS
    ]
    if null_fields:
        raise ValidationError(
            f"Fields cannot be null: {', '.join(to_camel(field) for field in null_fields)}"
        )

    user = storage.update_user(user_id, changes)
    if not user:
        raise NotFoundError(f"User with id {user_id} not found")
    return user


@router.get("/user/{user_id}/lessons", response_model=List[LessonWithState])
async def get_user_lessons(
    user_id: str,
    storage: Storage = Depends(get_storage)
):
    """Get the lesson map with each lesson's locked/unlocked/completed state for a learner."""
    user = get_user_or_404(storage, user_id)
    return [
        LessonWithState(
            **lesson.model_dump(),
            state=lesson_state(lesson, user).value,
            is_unlocked=unlock_state(lesson, user),
        )
        for lesson in storage.get_all_lessons()
    ]
