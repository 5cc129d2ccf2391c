# backend/modules/drink_dollars/exceptions.py

from decimal import Decimal

from fastapi import status

from core.error_handling import APIError


class InsufficientBalance(APIError):
    """The balance no longer covers the requested debit"""

    error_code = "INSUFFICIENT_BALANCE"

    def __init__(self, available: Decimal, requested: Decimal):
        self.available = available
        self.requested = requested
        super().__init__(
            message=f"Insufficient Drink Dollars: {available} available, {requested} requested",
            status_code=status.HTTP_409_CONFLICT,
            details={"available": str(available), "requested": str(requested)},
        )
