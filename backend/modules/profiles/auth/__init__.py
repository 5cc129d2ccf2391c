from .profile_auth import get_request_context, get_manager_context

__all__ = ["get_request_context", "get_manager_context"]
