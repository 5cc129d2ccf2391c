from .alcohol_balance_service import AlcoholBalanceService, expiry_status

__all__ = ["AlcoholBalanceService", "expiry_status"]
