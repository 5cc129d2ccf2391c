# backend/modules/profiles/routes/profile_routes.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.auth_context import RequestContext
from core.database import get_db
from ..auth import get_request_context
from ..schemas import ProfileResponse, ProfileUpdate, ReferralSummary
from ..services import ProfileService

router = APIRouter()


@router.get("/me", response_model=ProfileResponse)
def get_my_profile(
    context: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    return ProfileService(db).get_profile(context.profile_id)


@router.patch("/me", response_model=ProfileResponse)
def update_my_profile(
    data: ProfileUpdate,
    context: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    return ProfileService(db).update_profile(context, data)


@router.get("/me/referrals", response_model=ReferralSummary)
def get_my_referrals(
    context: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    """Own referral code and the friends who signed up with it."""
    return ProfileService(db).get_referral_summary(context)
