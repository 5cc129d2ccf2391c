# backend/modules/venues/tests/test_catalog.py

"""
Tests for venue catalog reads.
"""

from decimal import Decimal

import pytest

from core.error_handling import NotFoundError
from tests.factories import (
    ManagerProfileFactory,
    VenueCategoryFactory,
    VenueFactory,
    VenueRedeemItemFactory,
    VenueRoomFactory,
)
from ..schemas import BookingSession
from ..services import CatalogService, available_sessions


class TestCatalogService:

    @pytest.fixture
    def service(self, db_session):
        return CatalogService(db_session)

    def test_list_venues_by_category(self, service):
        rooftop = VenueCategoryFactory(name="Rooftop")
        VenueFactory(name="Sky Bar", categories=[rooftop])
        VenueFactory(name="Cellar")

        assert [v.name for v in service.list_venues()] == ["Cellar", "Sky Bar"]
        assert [v.name for v in service.list_venues("rooftop")] == ["Sky Bar"]

    def test_get_missing_venue(self, service):
        with pytest.raises(NotFoundError):
            service.get_venue(404)

    def test_available_sessions_follow_opening_windows(self):
        venue = VenueFactory.build(happy_hours="", night_hours="10pm - 4am", morning_hours=None)

        assert available_sessions(venue) == [BookingSession.NIGHT_HOURS]

    def test_price_list_is_keyed_by_venue_item(self, service):
        venue = VenueFactory()
        other = VenueFactory()
        cheap = VenueRedeemItemFactory(venue=venue, amount=Decimal("5.00"))
        pricey = VenueRedeemItemFactory(venue=venue, amount=Decimal("25.00"))
        VenueRedeemItemFactory(venue=other)

        price_list = service.get_price_list(venue.id)

        assert list(price_list) == [cheap.id, pricey.id]
        assert price_list[pricey.id].unit_price == Decimal("25.00")
        assert price_list[cheap.id].name == cheap.item.name

    def test_manages_venue(self, service):
        manager = ManagerProfileFactory()
        venue = VenueFactory(managers=[manager])
        other = VenueFactory()

        assert service.manages_venue(manager.id, venue.id)
        assert not service.manages_venue(manager.id, other.id)
        assert service.managed_venue_ids(manager.id) == [venue.id]


class TestVenueAPI:

    def test_venue_detail_lists_rooms_and_sessions(self, client, db_session):
        venue = VenueFactory()
        VenueRoomFactory(venue=venue, title="VIP", pax=8)

        response = client.get(f"/api/v1/venues/{venue.id}")

        assert response.status_code == 200
        body = response.json()
        assert body["rooms"][0]["title"] == "VIP"
        assert body["sessions"] == ["happy_hours", "night_hours"]

    def test_redeem_items_endpoint(self, client, db_session):
        item = VenueRedeemItemFactory(amount=Decimal("12.50"))

        response = client.get(f"/api/v1/venues/{item.venue_id}/redeem-items")

        assert response.status_code == 200
        assert response.json()[0]["id"] == item.id
        assert Decimal(response.json()[0]["unit_price"]) == Decimal("12.50")

    def test_unknown_venue_is_404(self, client, db_session):
        response = client.get("/api/v1/venues/999")

        assert response.status_code == 404
        assert response.json()["error_code"] == "NOT_FOUND"
