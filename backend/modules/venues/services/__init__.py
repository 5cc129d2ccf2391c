from .catalog_service import CatalogService, available_sessions
from .favourite_service import FavouriteService

__all__ = ["CatalogService", "FavouriteService", "available_sessions"]
