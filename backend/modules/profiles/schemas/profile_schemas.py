# backend/modules/profiles/schemas/profile_schemas.py

"""
Pydantic schemas for customer and manager accounts.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class ManagerAccountStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class ProfileRegister(BaseModel):
    """Schema for customer registration"""

    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=72)
    referral_code: Optional[str] = Field(
        None, max_length=20, description="Referral code of the friend who invited you"
    )

    @field_validator("username")
    @classmethod
    def validate_username(cls, v):
        v = v.strip()
        if not v.replace("_", "").replace(".", "").isalnum():
            raise ValueError("Username may only contain letters, digits, '.' and '_'")
        return v

    @field_validator("referral_code")
    @classmethod
    def normalise_referral_code(cls, v):
        if v is None:
            return v
        v = v.strip().upper()
        return v or None


class LoginRequest(BaseModel):
    """Username or email plus password"""

    identifier: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int


class ProfileUpdate(BaseModel):
    username: Optional[str] = Field(None, min_length=3, max_length=50)
    phone: Optional[str] = Field(None, max_length=30)


class ProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    phone: Optional[str] = None
    referral_code: str
    referrer_id: Optional[int] = None
    tier: str
    subscription_status: str
    subscription_expires_at: Optional[datetime] = None
    created_at: datetime


class ReferralSummary(BaseModel):
    referral_code: str
    referred_count: int
    referred_usernames: List[str] = []


class ManagerRegister(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=72)


class ManagerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    account_status: ManagerAccountStatus


class ManagerOption(BaseModel):
    """Entry of the preferred manager picker"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
