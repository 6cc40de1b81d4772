"""
Shared schema base and validation helpers.
"""
from pydantic import AfterValidator, BaseModel
from pydantic.alias_generators import to_camel
from typing import Annotated, List, Optional
from datetime import datetime, timezone


class CamelModel(BaseModel):
    """
    Base schema for wire models.

    Attributes are snake_case in Python and camelCase on the wire
    (e.g. ``xp_reward`` <-> ``xpReward``); both spellings are accepted on input.
    """

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


def dedupe_preserving_order(values: Optional[List[int]]) -> Optional[List[int]]:
    """
    Drop repeated ids while keeping first-seen order.

    Args:
        values: List of ids (may be None)

    Returns:
        List without duplicates, or None if values is None
    """
    if values is None:
        return None
    seen = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Attach UTC to naive datetimes.

    SQLite drops the offset of timezone-aware columns, so rows read back from
    it come out naive; every stored timestamp is UTC.
    """
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


UtcDatetime = Annotated[datetime, AfterValidator(ensure_utc)]
