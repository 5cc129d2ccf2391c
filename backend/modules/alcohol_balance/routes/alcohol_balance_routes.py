# backend/modules/alcohol_balance/routes/alcohol_balance_routes.py

from typing import List

from fastapi import APIRouter, Depends, File, UploadFile, status
from sqlalchemy.orm import Session

from core.auth_context import RequestContext
from core.database import get_db
from core.file_service import FileService, get_file_service
from modules.profiles.auth import get_request_context
from ..schemas import AlcoholBalanceCreate, AlcoholBalanceResponse
from ..services import AlcoholBalanceService

router = APIRouter(prefix="/alcohol-balance", tags=["Alcohol Balance"])


@router.get("", response_model=List[AlcoholBalanceResponse])
def list_balances(
    context: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    """Bottles kept for the caller, soonest expiry first."""
    return AlcoholBalanceService(db).list_balances(context)


@router.post("", response_model=AlcoholBalanceResponse, status_code=status.HTTP_201_CREATED)
def add_balance(
    data: AlcoholBalanceCreate,
    context: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    return AlcoholBalanceService(db).add_balance(context, data)


@router.post("/{balance_id}/image", response_model=AlcoholBalanceResponse)
async def attach_image(
    balance_id: int,
    file: UploadFile = File(...),
    context: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
    file_service: FileService = Depends(get_file_service),
):
    return await AlcoholBalanceService(db).attach_image(context, balance_id, file, file_service)
