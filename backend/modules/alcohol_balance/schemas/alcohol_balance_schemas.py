# backend/modules/alcohol_balance/schemas/alcohol_balance_schemas.py

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field


class AlcoholBalanceCreate(BaseModel):
    venue_id: int
    alcohol_name: str = Field(..., min_length=1, max_length=200)
    quantity: int = Field(1, ge=1)
    expiry_date: date
    reminder: int = Field(7, ge=1, description="Days before expiry to start reminding")


class AlcoholBalanceResponse(BaseModel):
    id: int
    venue_id: int
    venue_name: str
    alcohol_name: str
    quantity: int
    expiry_date: date
    reminder: int
    image_path: Optional[str] = None
    expiry_status: Optional[str] = None
    created_at: datetime
