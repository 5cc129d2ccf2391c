"""Request-scoped identity context.

The context is resolved once per request by the auth dependencies and
handed to services explicitly; services never look identity up on their
own.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ActorType(str, Enum):
    CUSTOMER = "customer"
    MANAGER = "manager"


@dataclass(frozen=True)
class RequestContext:
    """Represents the authenticated actor for a request."""

    profile_id: int
    username: str
    actor_type: ActorType = ActorType.CUSTOMER

    @property
    def is_manager(self) -> bool:
        return self.actor_type == ActorType.MANAGER
