# backend/modules/drink_dollars/models/drink_dollar_models.py

from datetime import datetime
import enum

from sqlalchemy import (
    Column, Integer, String, DateTime, ForeignKey, Numeric, Enum,
    CheckConstraint, Index
)

from core.database import Base
from core.mixins import TimestampMixin


class TransactionType(str, enum.Enum):
    """Kinds of balance-affecting events shown in the history"""
    BONUS = "bonus"
    BENEFIT = "benefit"
    DRINK = "drink"
    REDEEM = "redeem"


class DrinkDollarBalance(Base, TimestampMixin):
    """Current Drink Dollars balance, one row per profile"""
    __tablename__ = "drink_dollars"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("profiles.id"), nullable=False, unique=True)
    coins = Column(Numeric(12, 2), nullable=False, default=0)

    __table_args__ = (
        CheckConstraint("coins >= 0", name="drink_dollars_non_negative"),
    )

    def __repr__(self):
        return f"<DrinkDollarBalance user={self.user_id} coins={self.coins}>"


class DrinkDollarTransaction(Base):
    """Append-only history of balance changes"""
    __tablename__ = "drink_dollar_transactions"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("profiles.id"), nullable=False)
    booking_id = Column(Integer, ForeignKey("bookings.id"), nullable=True)

    trans_type = Column(Enum(TransactionType), nullable=False)
    title = Column(String(100), nullable=False)
    description = Column(String(255))
    coins = Column(Numeric(12, 2), nullable=False)  # signed delta
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    __table_args__ = (
        Index("idx_drink_dollar_transactions_user_date", "user_id", "created_at"),
    )

    def __repr__(self):
        return f"<DrinkDollarTransaction {self.id} {self.trans_type.value} {self.coins}>"
