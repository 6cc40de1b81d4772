"""
API v1 router aggregation.
"""
from fastapi import APIRouter
from jezik.api.v1.endpoints import (
    users, lessons, exercises, progress, shop, ai
)

api_router = APIRouter()

# Include all endpoint routers
# Note: Each router already defines its own paths, so we don't add another prefix here
api_router.include_router(users.router)
api_router.include_router(lessons.router)
api_router.include_router(exercises.router)
api_router.include_router(progress.router)
api_router.include_router(shop.router)
api_router.include_router(ai.router)
