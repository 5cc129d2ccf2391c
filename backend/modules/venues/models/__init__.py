from .venue_models import (
    BookingSession,
    VenueCategory,
    Venue,
    VenueRoom,
    RedeemItem,
    VenueRedeemItem,
    Favourite,
    venue_category_links,
    venue_managers,
)

__all__ = [
    "BookingSession",
    "VenueCategory",
    "Venue",
    "VenueRoom",
    "RedeemItem",
    "VenueRedeemItem",
    "Favourite",
    "venue_category_links",
    "venue_managers",
]
