from .booking_models import Booking, BookingStatus, Redemption

__all__ = ["Booking", "BookingStatus", "Redemption"]
