from .alcohol_balance_models import AlcoholBalance

__all__ = ["AlcoholBalance"]
