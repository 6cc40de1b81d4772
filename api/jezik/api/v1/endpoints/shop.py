from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from jezik.schemas.shop import ShopItemResponse
from jezik.schemas.user import User, PurchaseRequest
from jezik.services.shop_service import list_shop_items, purchase_item
from jezik.services.storage import Storage, get_storage
from jezik.api.v1.endpoints.utils import get_user_or_404

router = APIRouter(tags=["shop"])


@router.get("/shop/items", response_model=List[ShopItemResponse])
async def get_shop_items(
    user_id: Optional[str] = Query(None, alias="userId"),
    storage: Storage = Depends(get_storage)
):
    """List shop items; pass userId to get isUseful for that learner."""
    user = get_user_or_404(storage, user_id) if user_id else None
    return list_shop_items(user)


@router.post("/user/{user_id}/purchase", response_model=User)
async def purchase(
    user_id: str,
    request: PurchaseRequest,
    storage: Storage = Depends(get_storage)
):
    """Buy a shop item with gems. Fails with 400 and no changes if the learner cannot afford it."""
    user = get_user_or_404(storage, user_id)
    return storage.save_user(purchase_item(request.item_id, user))
