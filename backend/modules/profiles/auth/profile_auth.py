# backend/modules/profiles/auth/profile_auth.py

"""
FastAPI dependencies that resolve the bearer token into a RequestContext.
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from core.auth import decode_access_token
from core.auth_context import ActorType, RequestContext
from core.database import get_db
from core.error_handling import AuthorizationError, Unauthenticated
from ..models.profile_models import Profile, ManagerProfile

security = HTTPBearer(auto_error=False)


def get_request_context(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> RequestContext:
    """Resolve the calling customer once per request"""
    if credentials is None:
        raise Unauthenticated()

    profile_id = decode_access_token(credentials.credentials, ActorType.CUSTOMER)
    if profile_id is None:
        raise Unauthenticated("Invalid or expired token")

    profile = db.query(Profile).filter_by(id=profile_id).first()
    if not profile:
        raise Unauthenticated("Account no longer exists")

    return RequestContext(profile_id=profile.id, username=profile.username)


def get_manager_context(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> RequestContext:
    """Resolve the calling venue manager; only approved accounts pass"""
    if credentials is None:
        raise Unauthenticated()

    manager_id = decode_access_token(credentials.credentials, ActorType.MANAGER)
    if manager_id is None:
        raise Unauthenticated("Invalid or expired token")

    manager = db.query(ManagerProfile).filter_by(id=manager_id).first()
    if not manager:
        raise Unauthenticated("Account no longer exists")
    if not manager.is_approved:
        raise AuthorizationError("Manager account has not been approved")

    return RequestContext(
        profile_id=manager.id, username=manager.username, actor_type=ActorType.MANAGER
    )
