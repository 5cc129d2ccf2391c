from .profile_schemas import (
    ManagerAccountStatus,
    ProfileRegister,
    LoginRequest,
    TokenResponse,
    ProfileUpdate,
    ProfileResponse,
    ReferralSummary,
    ManagerRegister,
    ManagerResponse,
    ManagerOption,
)

__all__ = [
    "ManagerAccountStatus",
    "ProfileRegister",
    "LoginRequest",
    "TokenResponse",
    "ProfileUpdate",
    "ProfileResponse",
    "ReferralSummary",
    "ManagerRegister",
    "ManagerResponse",
    "ManagerOption",
]
