# backend/modules/venues/models/venue_models.py

"""
Venue catalog: categories, rooms and per-venue redeemable items.
"""

from sqlalchemy import (
    Column, Integer, String, Text, Float, Numeric, ForeignKey, Table,
    UniqueConstraint, CheckConstraint
)
from sqlalchemy.orm import relationship
import enum

from core.database import Base
from core.mixins import TimestampMixin
from modules.profiles.models import ManagerProfile


class BookingSession(str, enum.Enum):
    """Opening windows a booking can target; values name the Venue columns"""
    HAPPY_HOURS = "happy_hours"
    NIGHT_HOURS = "night_hours"
    MORNING_HOURS = "morning_hours"


venue_category_links = Table(
    "venue_category_links",
    Base.metadata,
    Column("venue_id", Integer, ForeignKey("venues.id", ondelete="CASCADE"), primary_key=True),
    Column("category_id", Integer, ForeignKey("venue_categories.id", ondelete="CASCADE"), primary_key=True),
)

venue_managers = Table(
    "venue_managers",
    Base.metadata,
    Column("venue_id", Integer, ForeignKey("venues.id", ondelete="CASCADE"), primary_key=True),
    Column("manager_id", Integer, ForeignKey("manager_profiles.id", ondelete="CASCADE"), primary_key=True),
)


class VenueCategory(Base):
    __tablename__ = "venue_categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    slug = Column(String(100), nullable=False, unique=True, index=True)

    venues = relationship("Venue", secondary=venue_category_links, back_populates="categories")


class Venue(Base, TimestampMixin):
    """A bar or club customers can book"""
    __tablename__ = "venues"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False, index=True)
    address = Column(String(500))
    description = Column(Text)
    pic_path = Column(String(500))
    latitude = Column(Float)
    longitude = Column(Float)

    pricing_tier = Column(String(10))  # "$", "$$", "$$$"
    minimum_spend = Column(Numeric(12, 2))

    # Free-text opening windows, e.g. "5pm - 8pm"; empty means not offered
    happy_hours = Column(String(100))
    night_hours = Column(String(100))
    morning_hours = Column(String(100))

    categories = relationship("VenueCategory", secondary=venue_category_links, back_populates="venues")
    managers = relationship(ManagerProfile, secondary=venue_managers)
    rooms = relationship("VenueRoom", back_populates="venue", cascade="all, delete-orphan")
    redeem_items = relationship("VenueRedeemItem", back_populates="venue", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Venue {self.id} {self.name}>"


class VenueRoom(Base):
    """Bookable room or table area within a venue"""
    __tablename__ = "venue_rooms"

    id = Column(Integer, primary_key=True, index=True)
    venue_id = Column(Integer, ForeignKey("venues.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(100), nullable=False)
    pax = Column(Integer, nullable=False)

    venue = relationship("Venue", back_populates="rooms")

    __table_args__ = (
        CheckConstraint("pax > 0", name="venue_rooms_pax_positive"),
    )


class RedeemItem(Base):
    """A drink or perk that can be redeemed with Drink Dollars"""
    __tablename__ = "redeem_items"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    description = Column(Text)
    pic_path = Column(String(500))


class VenueRedeemItem(Base):
    """Price of a redeemable item at one venue"""
    __tablename__ = "venue_redeem_items"

    id = Column(Integer, primary_key=True, index=True)
    venue_id = Column(Integer, ForeignKey("venues.id", ondelete="CASCADE"), nullable=False, index=True)
    item_id = Column(Integer, ForeignKey("redeem_items.id"), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)

    venue = relationship("Venue", back_populates="redeem_items")
    item = relationship("RedeemItem", lazy="joined")

    __table_args__ = (
        UniqueConstraint("venue_id", "item_id", name="uq_venue_redeem_items_venue_item"),
        CheckConstraint("amount >= 0", name="venue_redeem_items_amount_non_negative"),
    )


class Favourite(Base, TimestampMixin):
    """Venue saved by a customer"""
    __tablename__ = "favourites"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    venue_id = Column(Integer, ForeignKey("venues.id", ondelete="CASCADE"), nullable=False)

    venue = relationship("Venue")

    __table_args__ = (
        UniqueConstraint("user_id", "venue_id", name="uq_favourites_user_venue"),
    )
