from .venue_schemas import (
    BookingSession,
    CategoryResponse,
    RoomResponse,
    VenueSummary,
    VenueDetail,
    FavouriteVenue,
    PricedItem,
)

__all__ = [
    "BookingSession",
    "CategoryResponse",
    "RoomResponse",
    "VenueSummary",
    "VenueDetail",
    "FavouriteVenue",
    "PricedItem",
]
