# backend/modules/bookings/routes/merchant_routes.py

"""
Merchant portal endpoints for venue managers.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.auth_context import RequestContext
from core.database import get_db
from modules.profiles.auth import get_manager_context
from ..schemas import (
    ArrivalFilter,
    ArrivalVerification,
    BookingResponse,
    BookingStatus,
    MerchantBookingResponse,
    ScanRequest,
    StatusUpdate,
)
from ..services import MerchantBookingService, VerificationService

router = APIRouter(prefix="/merchant/bookings", tags=["Merchant"])


@router.get("", response_model=List[MerchantBookingResponse])
def list_bookings(
    status: Optional[BookingStatus] = Query(None),
    arrival: ArrivalFilter = Query(ArrivalFilter.ALL),
    context: RequestContext = Depends(get_manager_context),
    db: Session = Depends(get_db),
):
    return MerchantBookingService(db).list_bookings(context, status, arrival)


@router.patch("/{booking_id}/status", response_model=BookingResponse)
async def update_booking_status(
    booking_id: int,
    data: StatusUpdate,
    context: RequestContext = Depends(get_manager_context),
    db: Session = Depends(get_db),
):
    """Accept or reject a pending booking."""
    return await MerchantBookingService(db).update_status(context, booking_id, data.status)


@router.post("/{booking_id}/scan", response_model=ArrivalVerification)
async def scan_arrival(
    booking_id: int,
    data: ScanRequest,
    context: RequestContext = Depends(get_manager_context),
    db: Session = Depends(get_db),
):
    """
    Verify the code scanned at the door.

    A code that does not match still returns 200 with ``matched`` false
    and ``error_code`` set, so the scanner can simply try again.
    """
    return await VerificationService(db).scan_arrival(context, booking_id, data.scanned_text)
