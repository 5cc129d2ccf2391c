from .drink_dollar_models import (
    DrinkDollarBalance,
    DrinkDollarTransaction,
    TransactionType,
)

__all__ = [
    "DrinkDollarBalance",
    "DrinkDollarTransaction",
    "TransactionType",
]
