from .booking_schemas import (
    BookingStatus,
    RedemptionStatus,
    ArrivalFilter,
    BookingForm,
    BookingCreate,
    RedemptionRequest,
    RedemptionResponse,
    BookingResponse,
    BookingConfirmationResponse,
    CurrentBookingResponse,
    MerchantBookingResponse,
    StatusUpdate,
    ScanRequest,
    ArrivalVerification,
)

__all__ = [
    "BookingStatus",
    "RedemptionStatus",
    "ArrivalFilter",
    "BookingForm",
    "BookingCreate",
    "RedemptionRequest",
    "RedemptionResponse",
    "BookingResponse",
    "BookingConfirmationResponse",
    "CurrentBookingResponse",
    "MerchantBookingResponse",
    "StatusUpdate",
    "ScanRequest",
    "ArrivalVerification",
]
