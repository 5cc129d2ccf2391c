from .profile_service import ProfileService
from .manager_service import ManagerService

__all__ = [
    "ProfileService",
    "ManagerService",
]
