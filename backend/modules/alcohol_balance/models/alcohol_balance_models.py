# backend/modules/alcohol_balance/models/alcohol_balance_models.py

from sqlalchemy import Column, Integer, String, Date, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship

from core.database import Base
from core.mixins import TimestampMixin
from modules.venues.models import Venue


class AlcoholBalance(Base, TimestampMixin):
    """Bottle kept at a venue on the customer's behalf"""
    __tablename__ = "alcohol_balances"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("profiles.id"), nullable=False, index=True)
    venue_id = Column(Integer, ForeignKey("venues.id"), nullable=False)
    alcohol_name = Column(String(200), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    expiry_date = Column(Date, nullable=False)
    reminder = Column(Integer, nullable=False, default=7)  # days before expiry
    image_path = Column(String(500))

    venue = relationship(Venue)

    __table_args__ = (
        CheckConstraint("quantity >= 1", name="alcohol_balances_quantity_positive"),
        CheckConstraint("reminder >= 1", name="alcohol_balances_reminder_positive"),
    )
