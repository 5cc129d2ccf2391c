# backend/modules/venues/services/catalog_service.py

"""
Read-only catalog queries: categories, venues, rooms and price lists.
"""

from typing import Dict, List, Optional

from sqlalchemy.orm import Session, selectinload

from core.error_handling import NotFoundError
from ..models.venue_models import (
    BookingSession,
    Venue,
    VenueCategory,
    VenueRedeemItem,
    venue_managers,
)
from ..schemas.venue_schemas import PricedItem, VenueDetail


def available_sessions(venue: Venue) -> List[BookingSession]:
    """Sessions the venue offers; a session is offered only when its window is set"""
    return [
        session
        for session in BookingSession
        if (getattr(venue, session.value) or "").strip()
    ]


class CatalogService:
    """Service for venue catalog reads"""

    def __init__(self, db: Session):
        self.db = db

    def list_categories(self) -> List[VenueCategory]:
        return self.db.query(VenueCategory).order_by(VenueCategory.name).all()

    def list_venues(self, category_slug: Optional[str] = None) -> List[Venue]:
        query = self.db.query(Venue)
        if category_slug:
            query = query.join(Venue.categories).filter(VenueCategory.slug == category_slug)
        return query.order_by(Venue.name).all()

    def get_venue(self, venue_id: int) -> Venue:
        venue = (
            self.db.query(Venue)
            .options(selectinload(Venue.categories), selectinload(Venue.rooms))
            .filter(Venue.id == venue_id)
            .first()
        )
        if not venue:
            raise NotFoundError("Venue", venue_id)
        return venue

    def get_venue_detail(self, venue_id: int) -> VenueDetail:
        venue = self.get_venue(venue_id)
        detail = VenueDetail.model_validate(venue)
        detail.sessions = available_sessions(venue)
        return detail

    def get_price_list(self, venue_id: int) -> Dict[int, PricedItem]:
        """
        Current redeemable items of a venue keyed by venue item id.

        These prices are authoritative for carts and redemptions.
        """
        self.get_venue(venue_id)
        rows = (
            self.db.query(VenueRedeemItem)
            .filter(VenueRedeemItem.venue_id == venue_id)
            .order_by(VenueRedeemItem.amount, VenueRedeemItem.id)
            .all()
        )
        return {
            row.id: PricedItem(
                id=row.id,
                name=row.item.name,
                description=row.item.description,
                image=row.item.pic_path,
                unit_price=row.amount,
            )
            for row in rows
        }

    def manages_venue(self, manager_id: int, venue_id: int) -> bool:
        link = (
            self.db.query(venue_managers)
            .filter(
                venue_managers.c.manager_id == manager_id,
                venue_managers.c.venue_id == venue_id,
            )
            .first()
        )
        return link is not None

    def managed_venue_ids(self, manager_id: int) -> List[int]:
        rows = (
            self.db.query(venue_managers.c.venue_id)
            .filter(venue_managers.c.manager_id == manager_id)
            .all()
        )
        return [row.venue_id for row in rows]
