from .venue_routes import router

__all__ = ["router"]
