# backend/modules/venues/routes/venue_routes.py

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from core.auth_context import RequestContext
from core.database import get_db
from modules.profiles.auth import get_request_context
from ..schemas import CategoryResponse, FavouriteVenue, PricedItem, VenueDetail, VenueSummary
from ..services import CatalogService, FavouriteService

router = APIRouter(prefix="/venues", tags=["Venues"])


@router.get("/categories", response_model=List[CategoryResponse])
def list_categories(db: Session = Depends(get_db)):
    return CatalogService(db).list_categories()


@router.get("", response_model=List[VenueSummary])
def list_venues(
    category: Optional[str] = Query(None, description="Category slug"),
    db: Session = Depends(get_db),
):
    return CatalogService(db).list_venues(category)


# ========== Favourites ==========

@router.get("/favourites", response_model=List[FavouriteVenue])
def list_favourites(
    context: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    return FavouriteService(db).list_favourites(context)


@router.put("/{venue_id}/favourite", response_model=FavouriteVenue)
def add_favourite(
    venue_id: int,
    context: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    return FavouriteService(db).add_favourite(context, venue_id)


@router.delete("/{venue_id}/favourite", status_code=status.HTTP_204_NO_CONTENT)
def remove_favourite(
    venue_id: int,
    context: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    FavouriteService(db).remove_favourite(context, venue_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ========== Venue detail ==========

@router.get("/{venue_id}", response_model=VenueDetail)
def get_venue(venue_id: int, db: Session = Depends(get_db)):
    """Venue with rooms, categories and the sessions it can be booked for."""
    return CatalogService(db).get_venue_detail(venue_id)


@router.get("/{venue_id}/redeem-items", response_model=List[PricedItem])
def get_redeem_items(venue_id: int, db: Session = Depends(get_db)):
    return list(CatalogService(db).get_price_list(venue_id).values())
