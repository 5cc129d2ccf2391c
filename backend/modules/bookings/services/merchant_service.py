# backend/modules/bookings/services/merchant_service.py

from decimal import Decimal
from typing import List, Optional
import logging

from sqlalchemy.orm import Session, selectinload
from sqlalchemy.orm.exc import StaleDataError

from core.auth_context import RequestContext
from core.error_handling import ConflictError
from ..events import STATUS_CHANGED, BookingEvent, emit_booking_event
from ..models.booking_models import Booking, BookingStatus
from ..schemas.booking_schemas import ArrivalFilter, MerchantBookingResponse
from .verification_service import VerificationService

logger = logging.getLogger(__name__)


class MerchantBookingService:
    """Booking queue of the merchant portal"""

    def __init__(self, db: Session):
        self.db = db
        self.verification = VerificationService(db)

    def list_bookings(
        self,
        context: RequestContext,
        status: Optional[BookingStatus] = None,
        arrival: ArrivalFilter = ArrivalFilter.ALL,
    ) -> List[MerchantBookingResponse]:
        """Bookings across the manager's venues, newest first"""
        venue_ids = self.verification.catalog.managed_venue_ids(context.profile_id)
        if not venue_ids:
            return []

        query = (
            self.db.query(Booking)
            .options(
                selectinload(Booking.redemptions),
                selectinload(Booking.venue),
                selectinload(Booking.user),
            )
            .filter(Booking.venue_id.in_(venue_ids))
        )
        if status is not None:
            query = query.filter(Booking.status == status)
        if arrival == ArrivalFilter.ARRIVED:
            query = query.filter(Booking.is_arrived.is_(True))
        elif arrival == ArrivalFilter.NOT_ARRIVED:
            query = query.filter(Booking.is_arrived.is_(False))

        bookings = query.order_by(Booking.created_at.desc(), Booking.id.desc()).all()
        return [MerchantBookingResponse.model_validate(self._row(booking)) for booking in bookings]

    @staticmethod
    def _row(booking: Booking) -> dict:
        return {
            "id": booking.id,
            "venue_id": booking.venue_id,
            "user_id": booking.user_id,
            "preferred_date": booking.preferred_date,
            "session": booking.session.value,
            "party_size": booking.party_size,
            "room_id": booking.room_id,
            "manager_id": booking.manager_id,
            "reservation_name": booking.reservation_name,
            "notes": booking.notes,
            "booking_unique_code": booking.booking_unique_code,
            "status": booking.status.value,
            "is_arrived": booking.is_arrived,
            "arrived_at": booking.arrived_at,
            "receipt_url": booking.receipt_url,
            "created_at": booking.created_at,
            "customer_username": booking.user.username,
            "venue_name": booking.venue.name,
            "redemption_total": sum(
                (Decimal(r.amount) for r in booking.redemptions), Decimal("0")
            ),
        }

    async def update_status(
        self, context: RequestContext, booking_id: int, new_status: BookingStatus
    ) -> Booking:
        """Accept or reject a pending booking"""
        booking = self.verification.get_managed_booking(context, booking_id)

        if new_status == BookingStatus.PENDING:
            raise ConflictError("Bookings cannot be moved back to pending")
        if booking.status != BookingStatus.PENDING:
            raise ConflictError(
                f"Booking is already {booking.status.value}",
                {"status": booking.status.value},
            )

        booking.status = new_status
        try:
            self.db.commit()
        except StaleDataError as e:
            self.db.rollback()
            raise ConflictError(
                "Booking was changed concurrently, reload and try again",
                {"booking_id": booking_id},
            ) from e
        self.db.refresh(booking)

        logger.info(f"Booking {booking.id} {new_status.value} by manager {context.profile_id}")
        await emit_booking_event(
            BookingEvent(
                event_type=STATUS_CHANGED,
                booking_id=booking.id,
                user_id=booking.user_id,
                venue_id=booking.venue_id,
                actor_id=context.profile_id,
                metadata={"status": new_status.value},
            )
        )
        return booking
