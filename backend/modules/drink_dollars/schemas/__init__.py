from .drink_dollar_schemas import (
    TransactionType,
    BalanceResponse,
    TransactionResponse,
    HistoryDay,
    HistoryResponse,
    CartSelection,
    CartLineResponse,
    CartQuoteRequest,
    CartQuoteResponse,
)

__all__ = [
    "TransactionType",
    "BalanceResponse",
    "TransactionResponse",
    "HistoryDay",
    "HistoryResponse",
    "CartSelection",
    "CartLineResponse",
    "CartQuoteRequest",
    "CartQuoteResponse",
]
