# backend/modules/drink_dollars/services/redemption_cart.py

"""
In-memory selection of redeemable items for one booking.

The cart is priced from the venue's catalog price list and bounded by the
balance captured when it was opened. It never touches storage; the booking
service persists whatever ``finalize`` returns.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Mapping, Tuple
import logging

from sqlalchemy.orm import Session

from core.auth_context import RequestContext
from core.error_handling import APIValidationError, Unauthenticated
from modules.venues.schemas import PricedItem
from modules.venues.services import CatalogService
from ..exceptions import InsufficientBalance
from ..schemas.drink_dollar_schemas import (
    CartLineResponse,
    CartQuoteRequest,
    CartQuoteResponse,
)
from .ledger_service import LedgerService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CartLine:
    """Finalized selection line; ``item_id`` is the venue redeem item id"""

    item_id: int
    quantity: int
    unit_price: Decimal
    name: str = ""

    @property
    def amount(self) -> Decimal:
        return self.unit_price * self.quantity


class RedemptionCart:
    """Selection of catalog items that can never exceed the captured balance"""

    def __init__(self, price_list: Mapping[int, PricedItem], balance: Decimal):
        self.price_list = dict(price_list)
        self.balance = Decimal(balance)
        self._quantities: Dict[int, int] = {}
        self.rejected_item_ids: List[int] = []

    def _price_of(self, item_id: int) -> PricedItem:
        item = self.price_list.get(item_id)
        if item is None:
            raise ValueError(f"Item {item_id} is not offered at this venue")
        return item

    def add_item(self, item_id: int) -> bool:
        """
        Add one unit of ``item_id``.

        Returns False without changing the selection when the unit would
        push the total over the balance.
        """
        item = self._price_of(item_id)
        if self.total() + item.unit_price > self.balance:
            self.rejected_item_ids.append(item_id)
            logger.debug(f"Cart rejected item {item_id}: balance {self.balance} exhausted")
            return False

        self._quantities[item_id] = self._quantities.get(item_id, 0) + 1
        return True

    def remove_item(self, item_id: int) -> None:
        quantity = self._quantities.get(item_id)
        if not quantity:
            return
        if quantity == 1:
            del self._quantities[item_id]
        else:
            self._quantities[item_id] = quantity - 1

    def quantity_of(self, item_id: int) -> int:
        return self._quantities.get(item_id, 0)

    def total(self) -> Decimal:
        return sum(
            (self.price_list[item_id].unit_price * quantity
             for item_id, quantity in self._quantities.items()),
            Decimal("0"),
        )

    def remaining(self) -> Decimal:
        return self.balance - self.total()

    def is_empty(self) -> bool:
        return not self._quantities

    def requested_total(self) -> Decimal:
        """Accepted total plus every unit the balance turned away"""
        rejected = sum(
            (self.price_list[item_id].unit_price for item_id in self.rejected_item_ids),
            Decimal("0"),
        )
        return self.total() + rejected

    def ensure_covered(self) -> None:
        """
        Raise InsufficientBalance when any requested unit was rejected.

        A partially covered selection is never redeemed as a smaller one.
        """
        if self.rejected_item_ids:
            raise InsufficientBalance(available=self.balance, requested=self.requested_total())

    def finalize(self) -> Tuple[CartLine, ...]:
        """Immutable snapshot of the selection; empty means no redemptions"""
        return tuple(
            CartLine(
                item_id=item_id,
                quantity=quantity,
                unit_price=self.price_list[item_id].unit_price,
                name=self.price_list[item_id].name,
            )
            for item_id, quantity in sorted(self._quantities.items())
        )


class RedemptionCartService:
    """Opens carts against the caller's balance and a venue's price list"""

    def __init__(self, db: Session):
        self.db = db
        self.catalog = CatalogService(db)
        self.ledger = LedgerService(db)

    def open_cart(self, context: RequestContext, venue_id: int) -> RedemptionCart:
        if context is None or context.profile_id is None:
            raise Unauthenticated()
        return RedemptionCart(
            price_list=self.catalog.get_price_list(venue_id),
            balance=self.ledger.get_balance(context.profile_id),
        )

    def quote(self, context: RequestContext, request: CartQuoteRequest) -> CartQuoteResponse:
        """Replay a requested selection through a freshly opened cart"""
        cart = self.open_cart(context, request.venue_id)
        for selection in request.items:
            if selection.item_id not in cart.price_list:
                raise APIValidationError(
                    "Item is not offered at this venue", {"item_id": selection.item_id}
                )
            for _ in range(selection.quantity):
                if not cart.add_item(selection.item_id):
                    break

        lines = [
            CartLineResponse(
                item_id=line.item_id,
                name=line.name,
                quantity=line.quantity,
                unit_price=line.unit_price,
                amount=line.amount,
            )
            for line in cart.finalize()
        ]
        return CartQuoteResponse(
            venue_id=request.venue_id,
            balance=cart.balance,
            lines=lines,
            total=cart.total(),
            remaining=cart.remaining(),
            rejected_item_ids=sorted(set(cart.rejected_item_ids)),
        )
