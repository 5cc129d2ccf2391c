# backend/modules/drink_dollars/services/ledger_service.py

"""
Drink Dollars balance and transaction history.

The balance row is only ever decremented through a single conditional
UPDATE, so two concurrent debits can never take it below zero.
"""

from decimal import Decimal
from typing import List, Optional
import logging

from sqlalchemy import update
from sqlalchemy.orm import Session

from ..exceptions import InsufficientBalance
from ..models.drink_dollar_models import (
    DrinkDollarBalance,
    DrinkDollarTransaction,
    TransactionType,
)
from ..schemas.drink_dollar_schemas import (
    BalanceResponse,
    HistoryDay,
    HistoryResponse,
    TransactionResponse,
)

logger = logging.getLogger(__name__)


class LedgerService:
    """Service for the Drink Dollars ledger"""

    def __init__(self, db: Session):
        self.db = db

    def get_balance(self, user_id: int) -> Decimal:
        """Current balance; a profile without a ledger row has nothing to spend"""
        row = self.db.query(DrinkDollarBalance.coins).filter_by(user_id=user_id).first()
        if row is None:
            return Decimal("0")
        return Decimal(row.coins)

    def debit(
        self,
        user_id: int,
        amount: Decimal,
        title: str,
        description: Optional[str] = None,
        booking_id: Optional[int] = None,
        trans_type: TransactionType = TransactionType.REDEEM,
    ) -> DrinkDollarTransaction:
        """
        Subtract ``amount`` and append the matching ledger record.

        Does not commit; the caller owns the transaction so the debit can be
        grouped with the rows it pays for.

        Raises:
            InsufficientBalance: balance is lower than ``amount``
        """
        amount = Decimal(amount)
        if amount < 0:
            raise ValueError("Debit amount must not be negative")

        if amount > 0:
            result = self.db.execute(
                update(DrinkDollarBalance)
                .where(
                    DrinkDollarBalance.user_id == user_id,
                    DrinkDollarBalance.coins >= amount,
                )
                .values(coins=DrinkDollarBalance.coins - amount)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount != 1:
                available = self.get_balance(user_id)
                logger.warning(
                    f"Debit of {amount} refused for user {user_id}: balance {available}"
                )
                raise InsufficientBalance(available=available, requested=amount)

        transaction = DrinkDollarTransaction(
            user_id=user_id,
            booking_id=booking_id,
            trans_type=trans_type,
            title=title,
            description=description,
            coins=-amount,
        )
        self.db.add(transaction)
        self.db.flush()
        return transaction

    def list_transactions(self, user_id: int) -> List[DrinkDollarTransaction]:
        return (
            self.db.query(DrinkDollarTransaction)
            .filter_by(user_id=user_id)
            .order_by(DrinkDollarTransaction.created_at.desc(), DrinkDollarTransaction.id.desc())
            .all()
        )

    def get_balance_summary(self, user_id: int) -> BalanceResponse:
        return BalanceResponse(user_id=user_id, coins=self.get_balance(user_id))

    def history(self, user_id: int) -> HistoryResponse:
        """Balance plus transactions grouped by calendar day, newest day first"""
        days = {}
        for transaction in self.list_transactions(user_id):
            day = transaction.created_at.date()
            days.setdefault(day, []).append(TransactionResponse.model_validate(transaction))

        return HistoryResponse(
            coins=self.get_balance(user_id),
            days=[HistoryDay(day=day, transactions=items) for day, items in days.items()],
        )
