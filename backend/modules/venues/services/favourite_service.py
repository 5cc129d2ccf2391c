# backend/modules/venues/services/favourite_service.py

from typing import List
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from core.auth_context import RequestContext
from ..models.venue_models import Favourite, Venue
from .catalog_service import CatalogService

logger = logging.getLogger(__name__)


class FavouriteService:
    """Venues a customer has saved"""

    def __init__(self, db: Session):
        self.db = db
        self.catalog = CatalogService(db)

    def list_favourites(self, context: RequestContext) -> List[Venue]:
        """Saved venues with their categories, most recently saved first"""
        return (
            self.db.query(Venue)
            .join(Favourite, Favourite.venue_id == Venue.id)
            .options(selectinload(Venue.categories))
            .filter(Favourite.user_id == context.profile_id)
            .order_by(Favourite.created_at.desc(), Favourite.id.desc())
            .all()
        )

    def is_favourite(self, context: RequestContext, venue_id: int) -> bool:
        return (
            self.db.query(Favourite.id)
            .filter_by(user_id=context.profile_id, venue_id=venue_id)
            .first()
            is not None
        )

    def add_favourite(self, context: RequestContext, venue_id: int) -> Venue:
        """Save a venue; saving it again is a no-op"""
        venue = self.catalog.get_venue(venue_id)
        if self.is_favourite(context, venue.id):
            return venue

        self.db.add(Favourite(user_id=context.profile_id, venue_id=venue.id))
        try:
            self.db.commit()
        except IntegrityError:
            # Saved by a concurrent request
            self.db.rollback()
            logger.info(f"Venue {venue.id} already saved by user {context.profile_id}")
            return self.catalog.get_venue(venue_id)

        logger.info(f"User {context.profile_id} saved venue {venue.id}")
        return venue

    def remove_favourite(self, context: RequestContext, venue_id: int) -> None:
        """Forget a saved venue; removing one that is not saved is a no-op"""
        removed = (
            self.db.query(Favourite)
            .filter_by(user_id=context.profile_id, venue_id=venue_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        if removed:
            logger.info(f"User {context.profile_id} removed venue {venue_id} from favourites")
