from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import settings
from core.exceptions import register_exception_handlers
from app.startup import configure_startup_logging, run_startup_checks

# ========== Accounts ==========
from modules.profiles.routes import router as accounts_router

# ========== Catalog ==========
from modules.venues.routes import router as venue_router

# ========== Loyalty ==========
from modules.drink_dollars.routes import router as drink_dollars_router
from modules.alcohol_balance.routes import router as alcohol_balance_router

# ========== Bookings ==========
from modules.bookings.routes import router as booking_router

configure_startup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    run_startup_checks()
    yield


app = FastAPI(
    title="Nightlife Rewards API",
    description="""
    Venue discovery, bookings and Drink Dollars rewards.

    ## Features
    - Customer accounts with referral codes
    - Venue catalog with per-venue redeemable items
    - Bookings with Drink Dollars redemptions and QR check-in
    - Merchant portal for accepting bookings and verifying arrivals
    - Alcohol balance tracking
    """,
    version="1.0.0",
    lifespan=lifespan,
)

# Register exception handlers for consistent error responses
register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ========== Include routers ==========

app.include_router(accounts_router, prefix="/api/v1")
app.include_router(venue_router, prefix="/api/v1")
app.include_router(drink_dollars_router, prefix="/api/v1")
app.include_router(alcohol_balance_router, prefix="/api/v1")
app.include_router(booking_router, prefix="/api/v1")


@app.get("/health", tags=["Health"])
def health_check():
    return {"status": "ok", "environment": settings.environment}
