from fastapi import APIRouter
from .booking_routes import router as booking_router
from .merchant_routes import router as merchant_router

router = APIRouter()

router.include_router(booking_router)
router.include_router(merchant_router)

__all__ = ["router"]
