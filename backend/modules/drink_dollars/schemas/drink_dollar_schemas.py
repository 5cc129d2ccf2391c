# backend/modules/drink_dollars/schemas/drink_dollar_schemas.py

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.drink_dollar_models import TransactionType


class BalanceResponse(BaseModel):
    user_id: int
    coins: Decimal


class TransactionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    trans_type: TransactionType
    title: str
    description: Optional[str] = None
    coins: Decimal
    booking_id: Optional[int] = None
    created_at: datetime


class HistoryDay(BaseModel):
    day: date
    transactions: List[TransactionResponse]


class HistoryResponse(BaseModel):
    coins: Decimal
    days: List[HistoryDay] = []


class CartSelection(BaseModel):
    """Requested quantity of one venue item"""

    item_id: int = Field(..., description="Venue redeem item id")
    quantity: int = Field(1, ge=1, le=50)


class CartLineResponse(BaseModel):
    item_id: int
    name: str
    quantity: int
    unit_price: Decimal
    amount: Decimal


class CartQuoteRequest(BaseModel):
    venue_id: int
    items: List[CartSelection] = []


class CartQuoteResponse(BaseModel):
    """Outcome of replaying a selection against the caller's balance"""

    venue_id: int
    balance: Decimal
    lines: List[CartLineResponse] = []
    total: Decimal
    remaining: Decimal
    rejected_item_ids: List[int] = []
