from .booking_events import (
    BookingEvent,
    BOOKING_CREATED,
    REDEMPTION_APPLIED,
    REDEMPTION_FAILED,
    STATUS_CHANGED,
    ARRIVED,
    booking_event_handlers,
    register_event_handler,
    unregister_event_handler,
    emit_booking_event,
)

__all__ = [
    "BookingEvent",
    "BOOKING_CREATED",
    "REDEMPTION_APPLIED",
    "REDEMPTION_FAILED",
    "STATUS_CHANGED",
    "ARRIVED",
    "booking_event_handlers",
    "register_event_handler",
    "unregister_event_handler",
    "emit_booking_event",
]
