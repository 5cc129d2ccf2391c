from .alcohol_balance_schemas import AlcoholBalanceCreate, AlcoholBalanceResponse

__all__ = ["AlcoholBalanceCreate", "AlcoholBalanceResponse"]
