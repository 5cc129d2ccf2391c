# backend/modules/bookings/services/booking_service.py

"""
Booking checkout: validates the form, stores the booking with a unique
arrival code, then applies the Drink Dollars redemptions in a separate
transaction so a redemption failure never loses the booking.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional, Sequence, Tuple
import logging

from fastapi import UploadFile
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.orm.exc import StaleDataError

from core.auth_context import RequestContext
from core.codes import generate_code
from core.config import settings
from core.error_handling import (
    APIValidationError,
    CodeGenerationExhausted,
    ConflictError,
    NotFoundError,
    Unauthenticated,
)
from core.file_service import FileService
from modules.drink_dollars.services import CartLine, LedgerService, RedemptionCart
from modules.profiles.models import ManagerProfile
from modules.venues.models import Venue, VenueRoom
from modules.venues.services import CatalogService, available_sessions
from ..events import (
    BOOKING_CREATED,
    REDEMPTION_APPLIED,
    REDEMPTION_FAILED,
    BookingEvent,
    emit_booking_event,
)
from ..exceptions import BookingPersistFailed, InsufficientBalance, RedemptionPersistFailed
from ..models.booking_models import Booking, Redemption
from ..schemas.booking_schemas import BookingForm, RedemptionStatus

logger = logging.getLogger(__name__)

CODE_COLUMNS = ("booking_unique_code", "redemption_code")


def derive_redemption_code(booking_unique_code: str) -> str:
    """The redemption code is always the booking code plus the fixed suffix"""
    return f"{booking_unique_code}{settings.redemption_code_suffix}"


def _is_code_collision(error: IntegrityError) -> bool:
    message = str(error.orig)
    return any(column in message for column in CODE_COLUMNS)


@dataclass
class BookingConfirmation:
    """Result of a checkout, including how the redemption step went"""

    booking: Booking
    booking_unique_code: str
    redemption_code: str
    redemption_status: RedemptionStatus
    redemptions: List[Redemption] = field(default_factory=list)
    redemption_total: Decimal = Decimal("0")
    redemption_error: Optional[str] = None
    rejected_item_ids: List[int] = field(default_factory=list)


def _rejected_ids(cart: Optional[RedemptionCart]) -> List[int]:
    return sorted(set(cart.rejected_item_ids)) if cart is not None else []


class BookingService:
    """Service for customer bookings"""

    def __init__(self, db: Session):
        self.db = db
        self.catalog = CatalogService(db)
        self.ledger = LedgerService(db)

    # Checkout

    async def submit_booking(
        self,
        context: Optional[RequestContext],
        form: BookingForm,
        cart: Optional[RedemptionCart] = None,
    ) -> BookingConfirmation:
        """
        Create a booking and redeem the finalized cart against it.

        Everything is validated and priced before the first write. Once the
        booking is committed it stays, whatever happens to the redemptions.
        A cart that turned away units for lack of balance fails the
        redemption step as a whole with INSUFFICIENT_BALANCE.

        Raises:
            Unauthenticated: no profile on the context
            APIValidationError: invalid form or an item the venue does not offer
            CodeGenerationExhausted: no free booking code after the retry budget
            BookingPersistFailed: the booking row could not be stored
        """
        if context is None or context.profile_id is None:
            raise Unauthenticated()

        venue = self._validate_form(form)
        lines = self._price_lines(venue.id, cart.finalize() if cart is not None else ())

        booking = self._persist_booking(context, form)
        logger.info(
            f"Booking {booking.id} created for user {context.profile_id} "
            f"at venue {venue.id} with code {booking.booking_unique_code}"
        )
        await emit_booking_event(self._event(BOOKING_CREATED, booking, context))

        rejected = _rejected_ids(cart)
        if not lines and not rejected:
            return self._confirmation(booking, RedemptionStatus.NONE)

        try:
            if rejected:
                cart.ensure_covered()
            self._apply_redemptions(booking, venue, lines)
        except InsufficientBalance as e:
            self.db.rollback()
            return await self._redemption_failed(booking, context, e.error_code, rejected)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(
                f"Redemptions for booking {booking.id} could not be stored: {e}", exc_info=True
            )
            return await self._redemption_failed(
                booking, context, RedemptionPersistFailed.error_code
            )

        confirmation = self._confirmation(booking, RedemptionStatus.APPLIED)
        logger.info(
            f"Redeemed {confirmation.redemption_total} Drink Dollars on booking {booking.id}"
        )
        await emit_booking_event(
            self._event(
                REDEMPTION_APPLIED, booking, context,
                total=str(confirmation.redemption_total),
            )
        )
        return confirmation

    async def retry_redemption(
        self, context: RequestContext, booking_id: int, cart: RedemptionCart
    ) -> BookingConfirmation:
        """
        Redeem a cart against a booking whose redemption step failed.

        Unlike checkout, failures propagate as exceptions. Two retries racing
        on the same booking cannot both apply: the loser's version check
        fails and it gets a ConflictError.
        """
        booking = self.get_booking(context, booking_id)
        if booking.redemptions or booking.redeemed_at is not None:
            raise ConflictError(
                "Redemptions were already applied to this booking",
                {"booking_id": booking.id},
            )

        cart.ensure_covered()
        lines = self._price_lines(booking.venue_id, cart.finalize())
        if not lines:
            raise APIValidationError("Select at least one item to redeem")

        try:
            self._apply_redemptions(booking, booking.venue, lines)
        except InsufficientBalance:
            self.db.rollback()
            raise
        except StaleDataError as e:
            self.db.rollback()
            logger.warning(f"Booking {booking.id} was redeemed by a concurrent request")
            raise ConflictError(
                "Redemptions were already applied to this booking",
                {"booking_id": booking.id},
            ) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(
                f"Redemption retry for booking {booking.id} failed: {e}", exc_info=True
            )
            raise RedemptionPersistFailed() from e

        confirmation = self._confirmation(booking, RedemptionStatus.APPLIED)
        await emit_booking_event(
            self._event(
                REDEMPTION_APPLIED, booking, context,
                total=str(confirmation.redemption_total), retry=True,
            )
        )
        return confirmation

    def _validate_form(self, form: BookingForm) -> Venue:
        venue = self.catalog.get_venue(form.venue_id)
        errors = {}

        if form.preferred_date < date.today():
            errors["preferred_date"] = "Date cannot be in the past"

        if form.session not in available_sessions(venue):
            errors["session"] = f"{venue.name} does not open for {form.session.value}"

        if not 1 <= form.party_size <= settings.max_party_size:
            errors["party_size"] = f"Party size must be between 1 and {settings.max_party_size}"

        if form.room_id is not None:
            room = self.db.query(VenueRoom).filter_by(id=form.room_id).first()
            if not room or room.venue_id != venue.id:
                errors["room_id"] = "Room does not belong to this venue"
            elif form.party_size > room.pax:
                errors["room_id"] = f"{room.title} holds at most {room.pax} guests"

        if form.manager_id is not None:
            manager = self.db.query(ManagerProfile).filter_by(id=form.manager_id).first()
            if not manager or not manager.is_approved:
                errors["manager_id"] = "Preferred manager is not available"

        if errors:
            raise APIValidationError("Booking form is invalid", errors)
        return venue

    def _price_lines(
        self, venue_id: int, selection: Sequence[CartLine]
    ) -> Tuple[CartLine, ...]:
        """Re-price the selection from the catalog; client prices are ignored"""
        if not selection:
            return ()

        price_list = self.catalog.get_price_list(venue_id)
        priced = []
        for line in selection:
            item = price_list.get(line.item_id)
            if item is None:
                raise APIValidationError(
                    "Item is not offered at this venue", {"item_id": line.item_id}
                )
            priced.append(
                CartLine(
                    item_id=line.item_id,
                    quantity=line.quantity,
                    unit_price=item.unit_price,
                    name=item.name,
                )
            )
        return tuple(priced)

    def _persist_booking(self, context: RequestContext, form: BookingForm) -> Booking:
        """Insert and commit the booking, regenerating the code on collision"""
        attempts = settings.booking_code_max_attempts
        for attempt in range(1, attempts + 1):
            code = generate_code(settings.booking_code_length)
            booking = Booking(
                venue_id=form.venue_id,
                user_id=context.profile_id,
                preferred_date=form.preferred_date,
                session=form.session,
                party_size=form.party_size,
                room_id=form.room_id,
                manager_id=form.manager_id,
                reservation_name=form.reservation_name,
                notes=form.notes,
                booking_unique_code=code,
                redemption_code=derive_redemption_code(code),
            )
            self.db.add(booking)
            try:
                self.db.commit()
            except IntegrityError as e:
                self.db.rollback()
                if _is_code_collision(e):
                    logger.warning(f"Booking code collision on attempt {attempt}, regenerating")
                    continue
                logger.error(f"Booking insert rejected: {e}", exc_info=True)
                raise BookingPersistFailed() from e
            except SQLAlchemyError as e:
                self.db.rollback()
                logger.error(f"Booking insert failed: {e}", exc_info=True)
                raise BookingPersistFailed() from e

            self.db.refresh(booking)
            return booking

        raise CodeGenerationExhausted("booking code", attempts)

    def _apply_redemptions(
        self, booking: Booking, venue: Venue, lines: Sequence[CartLine]
    ) -> None:
        """Insert the redemption rows, debit the balance and commit them together"""
        # The booking update carries the version check that serializes redeemers
        booking.redeemed_at = datetime.utcnow()
        total = Decimal("0")
        for line in lines:
            self.db.add(
                Redemption(
                    booking_id=booking.id,
                    venue_item_id=line.item_id,
                    item_name=line.name,
                    quantity=line.quantity,
                    unit_price=line.unit_price,
                    amount=line.amount,
                )
            )
            total += line.amount
        self.db.flush()

        self.ledger.debit(
            booking.user_id,
            total,
            title=f"Redeemed at {venue.name}",
            description=f"Booking {booking.booking_unique_code}",
            booking_id=booking.id,
        )
        self.db.commit()

    async def _redemption_failed(
        self,
        booking: Booking,
        context: RequestContext,
        error_code: str,
        rejected_item_ids: Sequence[int] = (),
    ) -> BookingConfirmation:
        logger.warning(f"Redemption step failed for booking {booking.id}: {error_code}")
        await emit_booking_event(
            self._event(REDEMPTION_FAILED, booking, context, error_code=error_code)
        )
        confirmation = self._confirmation(booking, RedemptionStatus.FAILED)
        confirmation.redemption_error = error_code
        confirmation.rejected_item_ids = list(rejected_item_ids)
        return confirmation

    def _confirmation(self, booking: Booking, status: RedemptionStatus) -> BookingConfirmation:
        self.db.refresh(booking)
        redemptions = list(booking.redemptions)
        return BookingConfirmation(
            booking=booking,
            booking_unique_code=booking.booking_unique_code,
            redemption_code=booking.redemption_code,
            redemption_status=status,
            redemptions=redemptions,
            redemption_total=sum((Decimal(r.amount) for r in redemptions), Decimal("0")),
        )

    @staticmethod
    def _event(event_type: str, booking: Booking, context: RequestContext, **metadata) -> BookingEvent:
        return BookingEvent(
            event_type=event_type,
            booking_id=booking.id,
            user_id=booking.user_id,
            venue_id=booking.venue_id,
            actor_id=context.profile_id,
            metadata=metadata,
        )

    # Reads

    def get_booking(self, context: RequestContext, booking_id: int) -> Booking:
        if context is None or context.profile_id is None:
            raise Unauthenticated()
        booking = (
            self.db.query(Booking)
            .filter(Booking.id == booking_id, Booking.user_id == context.profile_id)
            .first()
        )
        if not booking:
            raise NotFoundError("Booking", booking_id)
        return booking

    def get_booking_confirmation(
        self, context: RequestContext, booking_id: int
    ) -> BookingConfirmation:
        booking = self.get_booking(context, booking_id)
        status = RedemptionStatus.APPLIED if booking.redemptions else RedemptionStatus.NONE
        return self._confirmation(booking, status)

    def get_current_booking(self, context: RequestContext) -> Optional[Booking]:
        """The caller's nearest booking that has not happened yet"""
        return (
            self.db.query(Booking)
            .options(selectinload(Booking.redemptions))
            .filter(
                Booking.user_id == context.profile_id,
                Booking.preferred_date >= date.today(),
            )
            .order_by(Booking.preferred_date, Booking.id)
            .first()
        )

    def list_past_bookings(self, context: RequestContext) -> List[Booking]:
        return (
            self.db.query(Booking)
            .filter(
                Booking.user_id == context.profile_id,
                Booking.preferred_date < date.today(),
            )
            .order_by(Booking.preferred_date.desc(), Booking.id.desc())
            .all()
        )

    async def upload_receipt(
        self,
        context: RequestContext,
        booking_id: int,
        file: UploadFile,
        file_service: FileService,
    ) -> Booking:
        """Attach a receipt photo to a booking that has already taken place"""
        booking = self.get_booking(context, booking_id)
        if booking.preferred_date >= date.today():
            raise ConflictError(
                "Receipts can only be uploaded for past bookings",
                {"preferred_date": booking.preferred_date.isoformat()},
            )

        url = await file_service.upload_file(
            settings.receipts_bucket, file, prefix=f"{booking.booking_unique_code}-"
        )
        booking.receipt_url = url
        self.db.commit()
        self.db.refresh(booking)

        logger.info(f"Receipt stored for booking {booking.id}")
        return booking
