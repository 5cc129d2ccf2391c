"""
Application startup checks and initialization.

Runs before the first request: verifies the database is reachable and,
outside production, creates any missing tables.
"""

import logging
from typing import List, Tuple

import sqlalchemy as sa
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from core.config import settings
from core.database import engine, Base

# Register every model on Base.metadata
from modules.profiles.models import Profile, ManagerProfile  # noqa: F401
from modules.venues.models import Venue  # noqa: F401
from modules.drink_dollars.models import DrinkDollarBalance  # noqa: F401
from modules.bookings.models import Booking  # noqa: F401
from modules.alcohol_balance.models import AlcoholBalance  # noqa: F401

logger = logging.getLogger(__name__)


class StartupValidator:
    """Validates application startup requirements"""

    def __init__(self, bind=None):
        self.engine = bind or engine
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def check_database_connection(self) -> bool:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1")).fetchone()
            logger.info("Database connection successful")
            return True
        except SQLAlchemyError as e:
            self.errors.append(f"Database connection failed: {e}")
            return False

    def check_tables(self) -> bool:
        """Create missing tables outside production; only report them in production"""
        existing = set(sa.inspect(self.engine).get_table_names())
        missing = sorted(set(Base.metadata.tables) - existing)
        if not missing:
            return True

        if settings.is_production:
            self.warnings.append(
                f"Missing database tables: {', '.join(missing)}. Run the schema migration."
            )
            return True

        Base.metadata.create_all(bind=self.engine)
        logger.info(f"Created tables: {', '.join(missing)}")
        return True

    def validate_all(self) -> Tuple[bool, List[str], List[str]]:
        passed = self.check_database_connection()
        if passed:
            passed = self.check_tables()
        return passed, self.errors, self.warnings


def run_startup_checks(bind=None) -> Tuple[bool, List[str]]:
    """Run all startup validation checks"""
    logger.info(f"Starting Nightlife Rewards backend ({settings.environment})")

    passed, errors, warnings = StartupValidator(bind).validate_all()

    for warning in warnings:
        logger.warning(warning)
    for error in errors:
        logger.error(error)

    if not passed and settings.is_production:
        raise RuntimeError("Cannot start in production with failing startup checks")
    if passed:
        logger.info("All startup checks passed")
    return passed, warnings


def configure_startup_logging():
    """Configure logging for startup"""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
