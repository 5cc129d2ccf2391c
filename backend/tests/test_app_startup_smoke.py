"""Smoke tests focused on startup-critical components."""

import sqlalchemy as sa

from app.main import app
from app.startup import StartupValidator, run_startup_checks
from core.database import Base, build_engine


def test_all_routers_are_mounted() -> None:
    paths = {route.path for route in app.router.routes}

    for expected in (
        "/api/v1/auth/login",
        "/api/v1/merchant/auth/login",
        "/api/v1/profile/me",
        "/api/v1/venues",
        "/api/v1/drink-dollars/balance",
        "/api/v1/alcohol-balance",
        "/api/v1/bookings",
        "/api/v1/merchant/bookings/{booking_id}/scan",
    ):
        assert expected in paths


def test_health(client) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_startup_creates_missing_tables() -> None:
    engine = build_engine("sqlite://")
    try:
        passed, warnings = run_startup_checks(engine)

        assert passed
        assert warnings == []
        assert set(Base.metadata.tables) <= set(sa.inspect(engine).get_table_names())
    finally:
        engine.dispose()


def test_startup_reports_unreachable_database() -> None:
    engine = build_engine("sqlite:////nonexistent-dir/nightlife.db")
    try:
        passed, errors, _ = StartupValidator(engine).validate_all()

        assert not passed
        assert errors and errors[0].startswith("Database connection failed")
    finally:
        engine.dispose()
