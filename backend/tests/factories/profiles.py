# backend/tests/factories/profiles.py

from decimal import Decimal

import factory
from factory import Sequence, LazyAttribute
from sqlalchemy.orm import object_session

from core.auth import get_password_hash
from modules.drink_dollars.models import DrinkDollarBalance
from modules.profiles.models import Profile, ManagerProfile, ManagerAccountStatus
from .base import BaseFactory

DEFAULT_PASSWORD = "password123"
_PASSWORD_HASH = get_password_hash(DEFAULT_PASSWORD)


class ProfileFactory(BaseFactory):
    """Customer with a Drink Dollars balance (``coins``, default 0)."""

    class Meta:
        model = Profile

    username = Sequence(lambda n: f"guest{n}")
    email = LazyAttribute(lambda obj: f"{obj.username}@example.com")
    password_hash = _PASSWORD_HASH
    referral_code = Sequence(lambda n: f"REF{n:07d}")

    @factory.post_generation
    def coins(self, create, extracted, **kwargs):
        if not create:
            return
        session = object_session(self)
        session.add(
            DrinkDollarBalance(user_id=self.id, coins=Decimal(str(extracted or 0)))
        )
        session.commit()


class ManagerProfileFactory(BaseFactory):
    class Meta:
        model = ManagerProfile

    username = Sequence(lambda n: f"manager{n}")
    email = LazyAttribute(lambda obj: f"{obj.username}@venue.example.com")
    password_hash = _PASSWORD_HASH
    account_status = ManagerAccountStatus.APPROVED
