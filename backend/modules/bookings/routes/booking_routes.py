# backend/modules/bookings/routes/booking_routes.py

"""
Customer booking endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Response, UploadFile, status
from sqlalchemy.orm import Session

from core.auth_context import RequestContext
from core.database import get_db
from core.error_handling import APIValidationError, NotFoundError
from core.file_service import FileService, get_file_service
from modules.drink_dollars.services import RedemptionCart, RedemptionCartService
from modules.drink_dollars.schemas import CartSelection
from modules.profiles.auth import get_request_context
from ..schemas import (
    BookingConfirmationResponse,
    BookingCreate,
    BookingResponse,
    CurrentBookingResponse,
    RedemptionRequest,
    RedemptionResponse,
)
from ..services import (
    BookingConfirmation,
    BookingService,
    render_check_in_code,
    render_redemption_code,
    to_data_url,
)

router = APIRouter(prefix="/bookings", tags=["Bookings"])


def _fill_cart(cart: RedemptionCart, items: List[CartSelection]) -> RedemptionCart:
    """Replay the requested quantities; units beyond the balance stay rejected on the cart"""
    for selection in items:
        for _ in range(selection.quantity):
            cart.add_item(selection.item_id)
    return cart


def _open_cart(
    db: Session, context: RequestContext, venue_id: int, items: List[CartSelection]
) -> Optional[RedemptionCart]:
    if not items:
        return None
    cart = RedemptionCartService(db).open_cart(context, venue_id)
    unknown = [s.item_id for s in items if s.item_id not in cart.price_list]
    if unknown:
        raise APIValidationError("Item is not offered at this venue", {"item_ids": unknown})
    return _fill_cart(cart, items)


def _to_response(confirmation: BookingConfirmation) -> BookingConfirmationResponse:
    has_redemptions = bool(confirmation.redemptions)
    return BookingConfirmationResponse(
        booking=BookingResponse.model_validate(confirmation.booking),
        booking_unique_code=confirmation.booking_unique_code,
        redemption_code=confirmation.redemption_code if has_redemptions else None,
        redemption_status=confirmation.redemption_status,
        redemptions=[RedemptionResponse.model_validate(r) for r in confirmation.redemptions],
        redemption_total=confirmation.redemption_total,
        redemption_error=confirmation.redemption_error,
        rejected_item_ids=confirmation.rejected_item_ids,
        check_in_qr=to_data_url(render_check_in_code(confirmation.booking_unique_code)),
        redemption_qr=(
            to_data_url(render_redemption_code(confirmation.redemption_code))
            if has_redemptions
            else None
        ),
    )


@router.post("", response_model=BookingConfirmationResponse, status_code=status.HTTP_201_CREATED)
async def create_booking(
    data: BookingCreate,
    context: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    """
    Book a venue and redeem Drink Dollars in one checkout.

    The booking is kept even when the redemption step fails; check
    ``redemption_status`` and retry through ``/bookings/{id}/redemptions``.
    """
    cart = _open_cart(db, context, data.venue_id, data.redemptions)
    confirmation = await BookingService(db).submit_booking(context, data, cart)
    return _to_response(confirmation)


@router.get("/current", response_model=Optional[CurrentBookingResponse])
def get_current_booking(
    context: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    booking = BookingService(db).get_current_booking(context)
    if booking is None:
        return None
    return CurrentBookingResponse(
        booking=BookingResponse.model_validate(booking),
        venue_name=booking.venue.name,
        venue_address=booking.venue.address,
        redemption_total=sum((r.amount for r in booking.redemptions), 0),
        redemption_count=len(booking.redemptions),
    )


@router.get("/past", response_model=List[BookingResponse])
def list_past_bookings(
    context: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    return BookingService(db).list_past_bookings(context)


@router.get("/{booking_id}", response_model=BookingConfirmationResponse)
def get_booking(
    booking_id: int,
    context: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    return _to_response(BookingService(db).get_booking_confirmation(context, booking_id))


@router.post("/{booking_id}/redemptions", response_model=BookingConfirmationResponse)
async def retry_redemption(
    booking_id: int,
    data: RedemptionRequest,
    context: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    """Redeem against a booking whose checkout redemption failed."""
    service = BookingService(db)
    booking = service.get_booking(context, booking_id)
    cart = _open_cart(db, context, booking.venue_id, data.items)
    confirmation = await service.retry_redemption(context, booking_id, cart)
    return _to_response(confirmation)


@router.get("/{booking_id}/check-in-code.png")
def get_check_in_code(
    booking_id: int,
    context: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    confirmation = BookingService(db).get_booking_confirmation(context, booking_id)
    png = render_check_in_code(confirmation.booking_unique_code)
    return Response(content=png, media_type="image/png")


@router.get("/{booking_id}/redemption-code.png")
def get_redemption_code(
    booking_id: int,
    context: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    confirmation = BookingService(db).get_booking_confirmation(context, booking_id)
    if not confirmation.redemptions:
        raise NotFoundError("Redemption code", booking_id)
    png = render_redemption_code(confirmation.redemption_code)
    return Response(content=png, media_type="image/png")


@router.post("/{booking_id}/receipt", response_model=BookingResponse)
async def upload_receipt(
    booking_id: int,
    file: UploadFile = File(...),
    context: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
    file_service: FileService = Depends(get_file_service),
):
    return await BookingService(db).upload_receipt(context, booking_id, file, file_service)
