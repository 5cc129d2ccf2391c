# backend/modules/profiles/routes/auth_routes.py

"""
Registration and login for customers and venue managers.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.database import get_db
from ..schemas import (
    LoginRequest,
    ManagerOption,
    ManagerRegister,
    ManagerResponse,
    ProfileRegister,
    ProfileResponse,
    TokenResponse,
)
from ..services import ManagerService, ProfileService

router = APIRouter()


@router.post(
    "/auth/register", response_model=ProfileResponse, status_code=status.HTTP_201_CREATED
)
def register(data: ProfileRegister, db: Session = Depends(get_db)):
    """
    Create a customer account.

    - Generates the account's own referral code
    - Links the referrer when a friend's code is supplied
    - Opens a zero Drink Dollars balance
    """
    return ProfileService(db).register(data)


@router.post("/auth/login", response_model=TokenResponse)
def login(data: LoginRequest, db: Session = Depends(get_db)):
    return ProfileService(db).authenticate(data.identifier, data.password)


@router.post(
    "/merchant/auth/register",
    response_model=ManagerResponse,
    status_code=status.HTTP_201_CREATED,
)
def register_manager(data: ManagerRegister, db: Session = Depends(get_db)):
    """Create a manager account; it stays pending until approved."""
    return ManagerService(db).register_manager(data)


@router.post("/merchant/auth/login", response_model=TokenResponse)
def login_manager(data: LoginRequest, db: Session = Depends(get_db)):
    return ManagerService(db).authenticate_manager(data.identifier, data.password)


@router.get("/managers", response_model=List[ManagerOption])
def list_managers(db: Session = Depends(get_db)):
    """Approved managers a customer can pick as preferred host."""
    return ManagerService(db).list_approved_managers()
