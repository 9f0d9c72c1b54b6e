"""API v1 router configuration."""

from fastapi import APIRouter

from api.v1.routes.users import router as users_router

router = APIRouter()
router.include_router(users_router)
