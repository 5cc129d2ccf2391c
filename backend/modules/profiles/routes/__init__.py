from fastapi import APIRouter
from .auth_routes import router as auth_router
from .profile_routes import router as profile_router

router = APIRouter(tags=["Accounts"])

router.include_router(auth_router)
router.include_router(profile_router, prefix="/profile", tags=["Profile"])

__all__ = ["router"]
