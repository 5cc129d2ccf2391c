# backend/modules/profiles/models/profile_models.py

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Enum, Index
from sqlalchemy.orm import relationship
import enum

from core.database import Base
from core.mixins import TimestampMixin


class ManagerAccountStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Profile(Base, TimestampMixin):
    """Customer account with referral attribution and membership tier"""
    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    phone = Column(String(30))

    # Referrals
    referral_code = Column(String(20), nullable=False, unique=True, index=True)
    referrer_id = Column(Integer, ForeignKey("profiles.id"), nullable=True)

    # Membership (mutated by the subscription flow)
    tier = Column(String(50), nullable=False, default="insider")
    subscription_status = Column(String(30), nullable=False, default="inactive")
    subscription_expires_at = Column(DateTime)

    referrer = relationship("Profile", remote_side=[id], back_populates="referrals")
    referrals = relationship("Profile", back_populates="referrer")

    def __repr__(self):
        return f"<Profile {self.id} {self.username}>"


class ManagerProfile(Base, TimestampMixin):
    """Venue staff account for the merchant portal"""
    __tablename__ = "manager_profiles"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=False, unique=True)
    password_hash = Column(String(255), nullable=False)
    account_status = Column(
        Enum(ManagerAccountStatus),
        nullable=False,
        default=ManagerAccountStatus.PENDING,
    )

    __table_args__ = (
        Index("idx_manager_profiles_status", "account_status"),
    )

    @property
    def is_approved(self) -> bool:
        return self.account_status == ManagerAccountStatus.APPROVED

    def __repr__(self):
        return f"<ManagerProfile {self.id} {self.username} ({self.account_status.value})>"
