from typing import Optional

from jezik.schemas.utils import CamelModel


class ShopItem(CamelModel):
    """Shop catalog entry."""
    id: str
    name: str
    description: str
    price: int
    type: str  # 'hearts', 'streak', 'boost' or 'protection'
    benefit: str

    class Config:
        frozen = True


class ShopItemResponse(ShopItem):
    """Shop item with whether it would help the given learner right now."""
    is_useful: Optional[bool] = None
