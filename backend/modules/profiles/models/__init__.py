from .profile_models import Profile, ManagerProfile, ManagerAccountStatus

__all__ = [
    "Profile",
    "ManagerProfile",
    "ManagerAccountStatus",
]
