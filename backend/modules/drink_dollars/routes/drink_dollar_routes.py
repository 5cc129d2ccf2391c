# backend/modules/drink_dollars/routes/drink_dollar_routes.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.auth_context import RequestContext
from core.database import get_db
from modules.profiles.auth import get_request_context
from ..schemas import BalanceResponse, CartQuoteRequest, CartQuoteResponse, HistoryResponse
from ..services import LedgerService, RedemptionCartService

router = APIRouter(prefix="/drink-dollars", tags=["Drink Dollars"])


@router.get("/balance", response_model=BalanceResponse)
def get_balance(
    context: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    return LedgerService(db).get_balance_summary(context.profile_id)


@router.get("/history", response_model=HistoryResponse)
def get_history(
    context: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    """Balance and transactions grouped by day, newest first."""
    return LedgerService(db).history(context.profile_id)


@router.post("/cart/quote", response_model=CartQuoteResponse)
def quote_cart(
    request: CartQuoteRequest,
    context: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    """
    Price a selection against the caller's current balance.

    Units that would exceed the balance are left out and reported in
    ``rejected_item_ids``; nothing is persisted.
    """
    return RedemptionCartService(db).quote(context, request)
