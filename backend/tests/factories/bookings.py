# backend/tests/factories/bookings.py

from datetime import date, timedelta

from factory import Sequence, SubFactory, LazyAttribute, LazyFunction

from modules.alcohol_balance.models import AlcoholBalance
from modules.bookings.models import Booking, BookingStatus
from modules.venues.models import BookingSession
from .base import BaseFactory
from .profiles import ProfileFactory
from .venues import VenueFactory


class BookingFactory(BaseFactory):
    """Pending booking for tomorrow night."""

    class Meta:
        model = Booking

    venue = SubFactory(VenueFactory)
    user = SubFactory(ProfileFactory)
    preferred_date = LazyFunction(lambda: date.today() + timedelta(days=1))
    session = BookingSession.NIGHT_HOURS
    party_size = 2
    booking_unique_code = Sequence(lambda n: f"BK{n:06d}")
    redemption_code = LazyAttribute(lambda obj: f"{obj.booking_unique_code}001")
    status = BookingStatus.PENDING
    is_arrived = False


class AlcoholBalanceFactory(BaseFactory):
    class Meta:
        model = AlcoholBalance

    user_id = LazyFunction(lambda: ProfileFactory().id)
    venue = SubFactory(VenueFactory)
    alcohol_name = "Hennessy VSOP"
    quantity = 1
    expiry_date = LazyFunction(lambda: date.today() + timedelta(days=60))
    reminder = 7
