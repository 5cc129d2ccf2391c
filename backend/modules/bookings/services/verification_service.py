# backend/modules/bookings/services/verification_service.py

"""
QR codes for check-in and redemption, and arrival verification at the door.
"""

from datetime import datetime
from io import BytesIO
import base64
import logging

import qrcode
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from core.auth_context import RequestContext
from core.config import settings
from core.error_handling import AuthorizationError, ConflictError, NotFoundError
from modules.venues.services import CatalogService
from ..events import ARRIVED, BookingEvent, emit_booking_event
from ..exceptions import VERIFICATION_MISMATCH
from ..models.booking_models import Booking, BookingStatus
from ..schemas.booking_schemas import ArrivalVerification

logger = logging.getLogger(__name__)


def render_qr_png(text: str) -> bytes:
    """Encode ``text`` verbatim as a PNG QR code; same input, same bytes"""
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=settings.qr_box_size,
        border=settings.qr_border,
    )
    qr.add_data(text)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")
    buffer = BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


def render_check_in_code(booking_unique_code: str) -> bytes:
    return render_qr_png(booking_unique_code)


def render_redemption_code(redemption_code: str) -> bytes:
    return render_qr_png(redemption_code)


def to_data_url(png: bytes) -> str:
    return f"data:image/png;base64,{base64.b64encode(png).decode()}"


def verify_arrival(scanned_text: str, expected_code: str) -> bool:
    """Exact, case-sensitive comparison of the decoded text"""
    return scanned_text == expected_code


class VerificationService:
    """Arrival scanning for venue managers"""

    def __init__(self, db: Session):
        self.db = db
        self.catalog = CatalogService(db)

    def get_managed_booking(self, context: RequestContext, booking_id: int) -> Booking:
        """Load a booking the scanning manager is allowed to act on"""
        if not context.is_manager:
            raise AuthorizationError("Only venue managers can verify arrivals")

        booking = self.db.query(Booking).filter_by(id=booking_id).first()
        if not booking:
            raise NotFoundError("Booking", booking_id)
        if not self.catalog.manages_venue(context.profile_id, booking.venue_id):
            raise AuthorizationError("You do not manage the venue of this booking")
        return booking

    async def scan_arrival(
        self, context: RequestContext, booking_id: int, scanned_text: str
    ) -> ArrivalVerification:
        """
        Mark the guest as arrived when the scanned text matches the booking code.

        A mismatch is reported in the result and leaves the booking untouched.
        Scanning an already arrived booking again is a successful no-op.
        """
        booking = self.get_managed_booking(context, booking_id)

        if booking.status != BookingStatus.ACCEPTED:
            raise ConflictError(
                "Only accepted bookings can be checked in",
                {"status": booking.status.value},
            )

        if not verify_arrival(scanned_text, booking.booking_unique_code):
            logger.warning(f"Arrival code mismatch for booking {booking.id}")
            return ArrivalVerification(
                booking_id=booking.id,
                matched=False,
                arrived=booking.is_arrived,
                message="Scanned code does not match this booking",
                error_code=VERIFICATION_MISMATCH,
            )

        if booking.is_arrived:
            return ArrivalVerification(
                booking_id=booking.id,
                matched=True,
                arrived=True,
                message="Guest already checked in",
            )

        booking.is_arrived = True
        booking.arrived_at = datetime.utcnow()
        booking.arrived_confirmed_by = context.profile_id
        try:
            self.db.commit()
        except StaleDataError as e:
            self.db.rollback()
            raise ConflictError(
                "Booking was changed concurrently, scan again", {"booking_id": booking_id}
            ) from e

        logger.info(f"Booking {booking.id} checked in by manager {context.profile_id}")
        await emit_booking_event(
            BookingEvent(
                event_type=ARRIVED,
                booking_id=booking.id,
                user_id=booking.user_id,
                venue_id=booking.venue_id,
                actor_id=context.profile_id,
            )
        )
        return ArrivalVerification(
            booking_id=booking.id,
            matched=True,
            arrived=True,
            message="Guest checked in",
        )
