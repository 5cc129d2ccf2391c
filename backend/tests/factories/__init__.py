# backend/tests/factories/__init__.py

"""
Shared test factories for the nightlife backend.
"""

from .base import BaseFactory, set_session
from .profiles import DEFAULT_PASSWORD, ProfileFactory, ManagerProfileFactory
from .venues import (
    VenueCategoryFactory,
    VenueFactory,
    VenueRoomFactory,
    RedeemItemFactory,
    VenueRedeemItemFactory,
)
from .bookings import BookingFactory, AlcoholBalanceFactory

__all__ = [
    # Base
    "BaseFactory",
    "set_session",

    # Accounts
    "DEFAULT_PASSWORD",
    "ProfileFactory",
    "ManagerProfileFactory",

    # Catalog
    "VenueCategoryFactory",
    "VenueFactory",
    "VenueRoomFactory",
    "RedeemItemFactory",
    "VenueRedeemItemFactory",

    # Bookings
    "BookingFactory",
    "AlcoholBalanceFactory",
]
