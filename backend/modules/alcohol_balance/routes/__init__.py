from .alcohol_balance_routes import router

__all__ = ["router"]
