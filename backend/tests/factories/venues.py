# backend/tests/factories/venues.py

from decimal import Decimal

import factory
from factory import Sequence, SubFactory, LazyAttribute
from sqlalchemy.orm import object_session

from modules.venues.models import (
    Venue,
    VenueCategory,
    VenueRoom,
    RedeemItem,
    VenueRedeemItem,
)
from .base import BaseFactory


class VenueCategoryFactory(BaseFactory):
    class Meta:
        model = VenueCategory

    name = Sequence(lambda n: f"Category {n}")
    slug = LazyAttribute(lambda obj: obj.name.lower().replace(" ", "-"))


class VenueFactory(BaseFactory):
    """Venue open for happy hours and nights, closed mornings."""

    class Meta:
        model = Venue

    name = Sequence(lambda n: f"Venue {n}")
    address = "1 Club Street"
    pricing_tier = "$$"
    minimum_spend = Decimal("100.00")
    happy_hours = "5pm - 8pm"
    night_hours = "10pm - 3am"
    morning_hours = None

    @factory.post_generation
    def managers(self, create, extracted, **kwargs):
        if not create or not extracted:
            return
        self.managers.extend(extracted)
        object_session(self).commit()

    @factory.post_generation
    def categories(self, create, extracted, **kwargs):
        if not create or not extracted:
            return
        self.categories.extend(extracted)
        object_session(self).commit()


class VenueRoomFactory(BaseFactory):
    class Meta:
        model = VenueRoom

    venue = SubFactory(VenueFactory)
    title = Sequence(lambda n: f"Booth {n}")
    pax = 6


class RedeemItemFactory(BaseFactory):
    class Meta:
        model = RedeemItem

    name = Sequence(lambda n: f"Cocktail {n}")
    description = "House special"


class VenueRedeemItemFactory(BaseFactory):
    class Meta:
        model = VenueRedeemItem

    venue = SubFactory(VenueFactory)
    item = SubFactory(RedeemItemFactory)
    amount = Decimal("10.00")
