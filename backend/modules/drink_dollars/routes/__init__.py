from .drink_dollar_routes import router

__all__ = ["router"]
