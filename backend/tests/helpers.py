# backend/tests/helpers.py

"""
Identity helpers shared by service and route tests.
"""

from core.auth import create_access_token
from core.auth_context import ActorType, RequestContext


def customer_context(profile) -> RequestContext:
    return RequestContext(profile_id=profile.id, username=profile.username)


def manager_context(manager) -> RequestContext:
    return RequestContext(
        profile_id=manager.id, username=manager.username, actor_type=ActorType.MANAGER
    )


def auth_headers(account, actor_type: ActorType = ActorType.CUSTOMER) -> dict:
    token = create_access_token(account.id, actor_type)
    return {"Authorization": f"Bearer {token}"}


def manager_headers(manager) -> dict:
    return auth_headers(manager, ActorType.MANAGER)
