# backend/modules/bookings/exceptions.py

"""
Failures of the booking transaction, each carrying a stable error code so
clients know which step to retry.
"""

from fastapi import status

from core.error_handling import APIError, CodeGenerationExhausted, Unauthenticated
from modules.drink_dollars.exceptions import InsufficientBalance

VERIFICATION_MISMATCH = "VERIFICATION_MISMATCH"


class BookingPersistFailed(APIError):
    """The booking row could not be stored; nothing was persisted"""

    error_code = "BOOKING_PERSIST_FAILED"

    def __init__(self, message: str = "Booking could not be saved, please try again"):
        super().__init__(message=message, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)


class RedemptionPersistFailed(APIError):
    """Redemption rows or the debit could not be stored; the booking stands"""

    error_code = "REDEMPTION_PERSIST_FAILED"

    def __init__(self, message: str = "Redemptions could not be saved"):
        super().__init__(message=message, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)


__all__ = [
    "BookingPersistFailed",
    "RedemptionPersistFailed",
    "InsufficientBalance",
    "CodeGenerationExhausted",
    "Unauthenticated",
    "VERIFICATION_MISMATCH",
]
