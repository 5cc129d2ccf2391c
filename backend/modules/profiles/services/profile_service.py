# backend/modules/profiles/services/profile_service.py

"""
Customer accounts: registration with referral attribution, login and
profile edits.
"""

from datetime import timedelta
from typing import Optional
import logging

from sqlalchemy import or_
from sqlalchemy.orm import Session

from core.auth import create_access_token, get_password_hash, verify_password
from core.auth_context import ActorType, RequestContext
from core.codes import generate_code
from core.config import settings
from core.error_handling import (
    APIValidationError,
    AuthenticationError,
    CodeGenerationExhausted,
    ConflictError,
    NotFoundError,
)
from modules.drink_dollars.models import DrinkDollarBalance
from ..models.profile_models import Profile
from ..schemas.profile_schemas import (
    ProfileRegister,
    ProfileUpdate,
    ReferralSummary,
    TokenResponse,
)

logger = logging.getLogger(__name__)


class ProfileService:
    """Service for customer profiles"""

    def __init__(self, db: Session):
        self.db = db

    def generate_referral_code(self) -> str:
        """Generate a referral code not held by any profile"""
        attempts = settings.referral_code_max_attempts
        for _ in range(attempts):
            code = generate_code(settings.referral_code_length)
            if not self.db.query(Profile.id).filter_by(referral_code=code).first():
                return code
            logger.warning("Referral code collision, regenerating")
        raise CodeGenerationExhausted("referral code", attempts)

    def register(self, data: ProfileRegister) -> Profile:
        """Create a profile, attribute its referrer and open its ledger"""
        existing = (
            self.db.query(Profile)
            .filter(or_(Profile.username == data.username, Profile.email == data.email))
            .first()
        )
        if existing:
            field = "username" if existing.username == data.username else "email"
            raise ConflictError(f"An account with this {field} already exists", {"field": field})

        referrer_id = None
        if data.referral_code:
            referrer = self.db.query(Profile).filter_by(referral_code=data.referral_code).first()
            if not referrer:
                raise APIValidationError(
                    "Referral code is not valid", {"referral_code": data.referral_code}
                )
            referrer_id = referrer.id

        profile = Profile(
            username=data.username,
            email=data.email,
            password_hash=get_password_hash(data.password),
            referral_code=self.generate_referral_code(),
            referrer_id=referrer_id,
        )
        self.db.add(profile)
        self.db.flush()

        self.db.add(DrinkDollarBalance(user_id=profile.id, coins=0))
        self.db.commit()
        self.db.refresh(profile)

        logger.info(
            f"Registered profile {profile.id}"
            + (f" referred by {referrer_id}" if referrer_id else "")
        )
        return profile

    def authenticate(self, identifier: str, password: str) -> TokenResponse:
        profile = (
            self.db.query(Profile)
            .filter(or_(Profile.username == identifier, Profile.email == identifier))
            .first()
        )
        if not profile or not verify_password(password, profile.password_hash):
            raise AuthenticationError("Invalid username or password")

        expires = timedelta(minutes=settings.jwt_access_token_expire_minutes)
        token = create_access_token(profile.id, ActorType.CUSTOMER, expires)
        return TokenResponse(access_token=token, expires_in=int(expires.total_seconds()))

    def get_profile(self, profile_id: int) -> Profile:
        profile = self.db.query(Profile).filter_by(id=profile_id).first()
        if not profile:
            raise NotFoundError("Profile", profile_id)
        return profile

    def update_profile(self, context: RequestContext, data: ProfileUpdate) -> Profile:
        profile = self.get_profile(context.profile_id)
        changes = data.model_dump(exclude_unset=True)

        new_username: Optional[str] = changes.get("username")
        if new_username and new_username != profile.username:
            taken = self.db.query(Profile.id).filter_by(username=new_username).first()
            if taken:
                raise ConflictError("An account with this username already exists", {"field": "username"})

        for field, value in changes.items():
            setattr(profile, field, value)

        self.db.commit()
        self.db.refresh(profile)
        return profile

    def get_referral_summary(self, context: RequestContext) -> ReferralSummary:
        profile = self.get_profile(context.profile_id)
        referred = (
            self.db.query(Profile.username)
            .filter_by(referrer_id=profile.id)
            .order_by(Profile.id)
            .all()
        )
        return ReferralSummary(
            referral_code=profile.referral_code,
            referred_count=len(referred),
            referred_usernames=[row.username for row in referred],
        )
