from .ledger_service import LedgerService
from .redemption_cart import CartLine, RedemptionCart, RedemptionCartService

__all__ = ["LedgerService", "CartLine", "RedemptionCart", "RedemptionCartService"]
