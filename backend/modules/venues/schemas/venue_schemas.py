# backend/modules/venues/schemas/venue_schemas.py

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from ..models.venue_models import BookingSession


class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    slug: str


class RoomResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    pax: int


class VenueSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    address: Optional[str] = None
    pic_path: Optional[str] = None
    pricing_tier: Optional[str] = None


class VenueDetail(VenueSummary):
    description: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    minimum_spend: Optional[Decimal] = None
    happy_hours: Optional[str] = None
    night_hours: Optional[str] = None
    morning_hours: Optional[str] = None
    categories: List[CategoryResponse] = []
    rooms: List[RoomResponse] = []
    sessions: List[BookingSession] = []


class PricedItem(BaseModel):
    """Catalog entry of a venue's price list; ``id`` is the venue item id"""

    id: int
    name: str
    description: Optional[str] = None
    image: Optional[str] = None
    unit_price: Decimal


class FavouriteVenue(VenueSummary):
    """Saved venue as shown on the favourites page"""

    minimum_spend: Optional[Decimal] = None
    categories: List[CategoryResponse] = []
