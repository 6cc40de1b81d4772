"""
Shop service: gem prices and what each item does to a learner.
"""
import logging
from typing import Dict, List, Optional

from jezik.core.exceptions import NotFoundError, ValidationError
from jezik.schemas.shop import ShopItem, ShopItemResponse
from jezik.schemas.user import User, MAX_HEARTS
from jezik.services.progression_service import refill_hearts

logger = logging.getLogger(__name__)


SHOP_ITEMS: List[ShopItem] = [
    ShopItem(
        id='refill-hearts',
        name='Refill Hearts',
        description='Restore all your hearts to full',
        price=350,
        type='hearts',
        benefit='Instant full hearts',
    ),
    ShopItem(
        id='streak-freeze',
        name='Streak Freeze',
        description='Protect your streak for one day if you forget to practice',
        price=200,
        type='protection',
        benefit='One day protection',
    ),
    ShopItem(
        id='double-xp',
        name='Double XP Boost',
        description='Earn double XP for the next 5 lessons',
        price=500,
        type='boost',
        benefit='5 lessons 2x XP',
    ),
    ShopItem(
        id='streak-repair',
        name='Streak Repair',
        description='Repair your broken streak and get back on track',
        price=450,
        type='streak',
        benefit='Restore your streak',
    ),
]

_ITEMS_BY_ID: Dict[str, ShopItem] = {item.id: item for item in SHOP_ITEMS}


def get_shop_item(item_id: str) -> ShopItem:
    item = _ITEMS_BY_ID.get(item_id)
    if item is None:
        raise NotFoundError(f"Shop item '{item_id}' not found")
    return item


def is_useful(item: ShopItem, learner: User) -> bool:
    """
    Whether buying the item would change anything for the learner right now.

    Advisory only; purchases are gated on gems alone.
    """
    if item.type == 'hearts':
        return learner.hearts < MAX_HEARTS
    if item.type == 'streak':
        return learner.streak == 0
    return True


def list_shop_items(learner: Optional[User] = None) -> List[ShopItemResponse]:
    """List the catalog, flagging useful items when a learner is given."""
    return [
        ShopItemResponse(
            **item.model_dump(),
            is_useful=is_useful(item, learner) if learner is not None else None,
        )
        for item in SHOP_ITEMS
    ]


def purchase_item(item_id: str, learner: User) -> User:
    """
    Spend gems on a shop item and apply its effect.

    Boost and protection items are paid for but carry no tracked effect on
    the learner record.

    Args:
        item_id: Shop item id
        learner: Current learner snapshot (not modified)

    Returns:
        Next learner snapshot

    Raises:
        NotFoundError: If the item does not exist
        ValidationError: If the learner cannot afford the item
    """
    item = get_shop_item(item_id)

    if learner.gems < item.price:
        raise ValidationError("Not enough gems")

    next_learner = learner.model_copy(update={"gems": learner.gems - item.price}, deep=True)

    if item.type == 'hearts':
        next_learner = refill_hearts(next_learner)
    elif item.type == 'streak':
        next_learner = next_learner.model_copy(update={"streak": (learner.streak or 0) + 1})

    logger.info(f"User {learner.id} bought '{item.id}' for {item.price} gems")
    return next_learner
