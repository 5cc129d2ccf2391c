# backend/modules/bookings/events/booking_events.py

"""
Event system for booking lifecycle hooks.
"""

from typing import Dict, Any, List, Callable, Optional
from datetime import datetime
from dataclasses import dataclass, field
import asyncio
import logging

logger = logging.getLogger(__name__)

BOOKING_CREATED = "booking.created"
REDEMPTION_APPLIED = "booking.redemption_applied"
REDEMPTION_FAILED = "booking.redemption_failed"
STATUS_CHANGED = "booking.status_changed"
ARRIVED = "booking.arrived"


@dataclass
class BookingEvent:
    """Booking lifecycle event"""

    event_type: str
    booking_id: int
    user_id: int
    venue_id: int
    timestamp: datetime = field(default_factory=datetime.utcnow)
    actor_id: Optional[int] = None  # Who triggered the event
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "event_type": self.event_type,
            "booking_id": self.booking_id,
            "user_id": self.user_id,
            "venue_id": self.venue_id,
            "timestamp": self.timestamp.isoformat(),
            "actor_id": self.actor_id,
            "metadata": self.metadata,
        }


# Event handlers registry
booking_event_handlers: Dict[str, List[Callable]] = {
    BOOKING_CREATED: [],
    REDEMPTION_APPLIED: [],
    REDEMPTION_FAILED: [],
    STATUS_CHANGED: [],
    ARRIVED: [],
}


def register_event_handler(event_type: str, handler: Callable):
    if event_type not in booking_event_handlers:
        raise ValueError(f"Unknown event type: {event_type}")

    booking_event_handlers[event_type].append(handler)
    logger.info(f"Registered handler {handler.__name__} for {event_type}")


def unregister_event_handler(event_type: str, handler: Callable):
    if event_type in booking_event_handlers and handler in booking_event_handlers[event_type]:
        booking_event_handlers[event_type].remove(handler)


async def emit_booking_event(event: BookingEvent):
    """Emit a booking event to all registered handlers"""
    handlers = list(booking_event_handlers.get(event.event_type, []))

    if not handlers:
        logger.debug(f"No handlers registered for {event.event_type}")
        return

    tasks = []
    for handler in handlers:
        if asyncio.iscoroutinefunction(handler):
            tasks.append(handler(event))
        else:
            tasks.append(asyncio.to_thread(handler, event))

    # Handler failures never undo the booking
    results = await asyncio.gather(*tasks, return_exceptions=True)
    for handler, result in zip(handlers, results):
        if isinstance(result, Exception):
            logger.error(f"Handler {handler.__name__} failed for {event.event_type}: {result}")


async def log_booking_event(event: BookingEvent):
    logger.info(f"Event logged: {event.to_dict()}")


for _event_type in booking_event_handlers:
    register_event_handler(_event_type, log_booking_event)
