# backend/modules/alcohol_balance/services/alcohol_balance_service.py

from datetime import date
from typing import List, Optional
import logging

from fastapi import UploadFile
from sqlalchemy.orm import Session, selectinload

from core.auth_context import RequestContext
from core.config import settings
from core.error_handling import NotFoundError
from core.file_service import FileService
from modules.venues.services import CatalogService
from ..models.alcohol_balance_models import AlcoholBalance
from ..schemas.alcohol_balance_schemas import AlcoholBalanceCreate, AlcoholBalanceResponse

logger = logging.getLogger(__name__)


def expiry_status(expiry_date: date, reminder_days: int, today: Optional[date] = None) -> Optional[str]:
    """'Expired', 'Expiring in N days' inside the reminder window, else None"""
    today = today or date.today()
    days_left = (expiry_date - today).days
    if days_left < 0:
        return "Expired"
    if days_left <= reminder_days:
        return f"Expiring in {days_left} day{'' if days_left == 1 else 's'}"
    return None


class AlcoholBalanceService:
    """Service for bottles kept at venues"""

    def __init__(self, db: Session):
        self.db = db

    def _to_response(self, balance: AlcoholBalance) -> AlcoholBalanceResponse:
        return AlcoholBalanceResponse(
            id=balance.id,
            venue_id=balance.venue_id,
            venue_name=balance.venue.name,
            alcohol_name=balance.alcohol_name,
            quantity=balance.quantity,
            expiry_date=balance.expiry_date,
            reminder=balance.reminder,
            image_path=balance.image_path,
            expiry_status=expiry_status(balance.expiry_date, balance.reminder),
            created_at=balance.created_at,
        )

    def list_balances(self, context: RequestContext) -> List[AlcoholBalanceResponse]:
        balances = (
            self.db.query(AlcoholBalance)
            .options(selectinload(AlcoholBalance.venue))
            .filter(AlcoholBalance.user_id == context.profile_id)
            .order_by(AlcoholBalance.expiry_date, AlcoholBalance.id)
            .all()
        )
        return [self._to_response(b) for b in balances]

    def add_balance(
        self, context: RequestContext, data: AlcoholBalanceCreate
    ) -> AlcoholBalanceResponse:
        CatalogService(self.db).get_venue(data.venue_id)

        balance = AlcoholBalance(user_id=context.profile_id, **data.model_dump())
        self.db.add(balance)
        self.db.commit()
        self.db.refresh(balance)

        logger.info(f"Alcohol balance {balance.id} added for user {context.profile_id}")
        return self._to_response(balance)

    async def attach_image(
        self,
        context: RequestContext,
        balance_id: int,
        file: UploadFile,
        file_service: FileService,
    ) -> AlcoholBalanceResponse:
        balance = (
            self.db.query(AlcoholBalance)
            .filter_by(id=balance_id, user_id=context.profile_id)
            .first()
        )
        if not balance:
            raise NotFoundError("Alcohol balance", balance_id)

        balance.image_path = await file_service.upload_file(
            settings.alcohol_balance_bucket, file, prefix=f"{context.profile_id}-"
        )
        self.db.commit()
        self.db.refresh(balance)
        return self._to_response(balance)
