# backend/modules/bookings/schemas/booking_schemas.py

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from modules.drink_dollars.schemas import CartSelection
from modules.venues.schemas import BookingSession
from ..models.booking_models import BookingStatus


class RedemptionStatus(str, Enum):
    """Outcome of the redemption step of a booking"""
    NONE = "none"
    APPLIED = "applied"
    FAILED = "failed"


class ArrivalFilter(str, Enum):
    ALL = "all"
    ARRIVED = "arrived"
    NOT_ARRIVED = "not_arrived"


class BookingForm(BaseModel):
    """Booking request; prices are always taken from the venue catalog"""

    venue_id: int
    preferred_date: date
    session: BookingSession
    party_size: int = Field(..., ge=1)
    room_id: Optional[int] = None
    manager_id: Optional[int] = Field(None, description="Preferred manager")
    reservation_name: Optional[str] = Field(None, max_length=100)
    notes: Optional[str] = Field(None, max_length=1000)

    @field_validator("reservation_name", "notes")
    @classmethod
    def strip_text(cls, v):
        if v is None:
            return v
        return v.strip() or None


class BookingCreate(BookingForm):
    """Form plus the redemption selection submitted with it"""

    redemptions: List[CartSelection] = []


class RedemptionRequest(BaseModel):
    items: List[CartSelection] = Field(..., min_length=1)


class RedemptionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    venue_item_id: int
    item_name: str
    quantity: int
    unit_price: Decimal
    amount: Decimal


class BookingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    venue_id: int
    user_id: int
    preferred_date: date
    session: BookingSession
    party_size: int
    room_id: Optional[int] = None
    manager_id: Optional[int] = None
    reservation_name: Optional[str] = None
    notes: Optional[str] = None
    booking_unique_code: str
    status: BookingStatus
    is_arrived: bool
    arrived_at: Optional[datetime] = None
    redeemed_at: Optional[datetime] = None
    receipt_url: Optional[str] = None
    created_at: datetime


class BookingConfirmationResponse(BaseModel):
    """Everything the client needs to show the confirmation page"""

    booking: BookingResponse
    booking_unique_code: str
    redemption_code: Optional[str] = None
    redemption_status: RedemptionStatus
    redemptions: List[RedemptionResponse] = []
    redemption_total: Decimal = Decimal("0")
    redemption_error: Optional[str] = None
    rejected_item_ids: List[int] = Field(
        default_factory=list, description="Items the balance could not cover"
    )
    check_in_qr: Optional[str] = Field(None, description="PNG data URL of the booking code")
    redemption_qr: Optional[str] = Field(None, description="PNG data URL of the redemption code")


class CurrentBookingResponse(BaseModel):
    booking: BookingResponse
    venue_name: str
    venue_address: Optional[str] = None
    redemption_total: Decimal = Decimal("0")
    redemption_count: int = 0


class MerchantBookingResponse(BookingResponse):
    customer_username: str
    venue_name: str
    redemption_total: Decimal = Decimal("0")


class StatusUpdate(BaseModel):
    status: BookingStatus

    @field_validator("status")
    @classmethod
    def decision_only(cls, v):
        if v == BookingStatus.PENDING:
            raise ValueError("Status can only be changed to accepted or rejected")
        return v


class ScanRequest(BaseModel):
    scanned_text: str = Field(..., max_length=100)


class ArrivalVerification(BaseModel):
    booking_id: int
    matched: bool
    arrived: bool
    message: str
    error_code: Optional[str] = None
