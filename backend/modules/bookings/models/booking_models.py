# backend/modules/bookings/models/booking_models.py

"""
Venue bookings and the Drink Dollars redemptions attached to them.
"""

from sqlalchemy import (
    Column, Integer, String, Text, Date, DateTime, Boolean, Numeric,
    ForeignKey, Enum, UniqueConstraint, CheckConstraint, Index
)
from sqlalchemy.orm import relationship
import enum

from core.database import Base
from core.mixins import TimestampMixin
from modules.profiles.models import Profile, ManagerProfile
from modules.venues.models import BookingSession, Venue, VenueRoom


class BookingStatus(str, enum.Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class Booking(Base, TimestampMixin):
    """A customer's booking at a venue"""
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    venue_id = Column(Integer, ForeignKey("venues.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("profiles.id"), nullable=False, index=True)

    # Request details
    preferred_date = Column(Date, nullable=False, index=True)
    session = Column(Enum(BookingSession), nullable=False)
    party_size = Column(Integer, nullable=False)
    room_id = Column(Integer, ForeignKey("venue_rooms.id"))
    manager_id = Column(Integer, ForeignKey("manager_profiles.id"))  # preferred host
    reservation_name = Column(String(100))
    notes = Column(Text)

    # Codes
    booking_unique_code = Column(String(20), nullable=False)
    redemption_code = Column(String(30), nullable=False)

    # Lifecycle
    status = Column(Enum(BookingStatus), nullable=False, default=BookingStatus.PENDING, index=True)
    is_arrived = Column(Boolean, nullable=False, default=False)
    arrived_at = Column(DateTime)
    arrived_confirmed_by = Column(Integer, ForeignKey("manager_profiles.id"))

    receipt_url = Column(String(500))
    redeemed_at = Column(DateTime)  # set with the redemption rows; bumps version

    version = Column(Integer, nullable=False, default=1)

    venue = relationship(Venue)
    user = relationship(Profile)
    room = relationship(VenueRoom)
    manager = relationship(ManagerProfile, foreign_keys=[manager_id])
    redemptions = relationship(
        "Redemption",
        back_populates="booking",
        cascade="all, delete-orphan",
        order_by="Redemption.id",
    )

    __mapper_args__ = {"version_id_col": version}

    __table_args__ = (
        UniqueConstraint("booking_unique_code", name="uq_bookings_booking_unique_code"),
        UniqueConstraint("redemption_code", name="uq_bookings_redemption_code"),
        CheckConstraint("party_size > 0", name="bookings_party_size_positive"),
        Index("idx_bookings_user_date", "user_id", "preferred_date"),
    )

    @property
    def has_redemptions(self) -> bool:
        return bool(self.redemptions)

    def __repr__(self):
        return f"<Booking {self.id} {self.booking_unique_code} ({self.status.value})>"


class Redemption(Base):
    """One redeemed catalog line, priced at booking time"""
    __tablename__ = "redemptions"

    id = Column(Integer, primary_key=True, index=True)
    booking_id = Column(Integer, ForeignKey("bookings.id", ondelete="CASCADE"), nullable=False, index=True)
    venue_item_id = Column(Integer, ForeignKey("venue_redeem_items.id"), nullable=False)
    item_name = Column(String(200), nullable=False)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(12, 2), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)

    booking = relationship("Booking", back_populates="redemptions")

    __table_args__ = (
        CheckConstraint("quantity > 0", name="redemptions_quantity_positive"),
    )
