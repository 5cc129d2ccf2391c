from .booking_service import BookingConfirmation, BookingService, derive_redemption_code
from .merchant_service import MerchantBookingService
from .verification_service import (
    VerificationService,
    render_check_in_code,
    render_qr_png,
    render_redemption_code,
    to_data_url,
    verify_arrival,
)

__all__ = [
    "BookingConfirmation",
    "BookingService",
    "derive_redemption_code",
    "MerchantBookingService",
    "VerificationService",
    "render_check_in_code",
    "render_qr_png",
    "render_redemption_code",
    "to_data_url",
    "verify_arrival",
]
