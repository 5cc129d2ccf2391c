# backend/modules/profiles/services/manager_service.py

from datetime import timedelta
from typing import List
import logging

from sqlalchemy import or_
from sqlalchemy.orm import Session

from core.auth import create_access_token, get_password_hash, verify_password
from core.auth_context import ActorType
from core.config import settings
from core.error_handling import AuthenticationError, ConflictError
from ..models.profile_models import ManagerProfile, ManagerAccountStatus
from ..schemas.profile_schemas import ManagerRegister, TokenResponse

logger = logging.getLogger(__name__)


class ManagerService:
    """Merchant portal accounts"""

    def __init__(self, db: Session):
        self.db = db

    def register_manager(self, data: ManagerRegister) -> ManagerProfile:
        """Create a manager account awaiting approval"""
        existing = (
            self.db.query(ManagerProfile.id)
            .filter(or_(ManagerProfile.username == data.username, ManagerProfile.email == data.email))
            .first()
        )
        if existing:
            raise ConflictError("A manager account with this username or email already exists")

        manager = ManagerProfile(
            username=data.username,
            email=data.email,
            password_hash=get_password_hash(data.password),
            account_status=ManagerAccountStatus.PENDING,
        )
        self.db.add(manager)
        self.db.commit()
        self.db.refresh(manager)

        logger.info(f"Registered manager {manager.id}, awaiting approval")
        return manager

    def authenticate_manager(self, identifier: str, password: str) -> TokenResponse:
        manager = (
            self.db.query(ManagerProfile)
            .filter(or_(ManagerProfile.username == identifier, ManagerProfile.email == identifier))
            .first()
        )
        if not manager or not verify_password(password, manager.password_hash):
            raise AuthenticationError("Invalid username or password")
        if not manager.is_approved:
            raise AuthenticationError("Manager account has not been approved")

        expires = timedelta(minutes=settings.jwt_access_token_expire_minutes)
        token = create_access_token(manager.id, ActorType.MANAGER, expires)
        return TokenResponse(access_token=token, expires_in=int(expires.total_seconds()))

    def list_approved_managers(self) -> List[ManagerProfile]:
        return (
            self.db.query(ManagerProfile)
            .filter_by(account_status=ManagerAccountStatus.APPROVED)
            .order_by(ManagerProfile.username)
            .all()
        )
