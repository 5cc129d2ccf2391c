"""
Pytest configuration file for backend testing.
"""
import os
import sys
from pathlib import Path

# Settings are read at import time
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "test")

# Add the backend directory to Python path so imports work correctly
backend_dir = Path(__file__).parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from core.database import Base, build_engine, get_db
from core.file_service import FileService, get_file_service

# Import all models to register them with SQLAlchemy
from modules.profiles.models import profile_models  # noqa: F401
from modules.venues.models import venue_models  # noqa: F401
from modules.drink_dollars.models import drink_dollar_models  # noqa: F401
from modules.bookings.models import booking_models  # noqa: F401
from modules.alcohol_balance.models import alcohol_balance_models  # noqa: F401

from app.main import app
from tests.factories import set_session


class FakeS3Client:
    """Records put_object calls instead of talking to S3."""

    def __init__(self):
        self.objects = {}

    def put_object(self, Bucket, Key, Body, **kwargs):
        self.objects[(Bucket, Key)] = Body
        return {"ETag": '"fake"'}


@pytest.fixture
def test_engine():
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(test_engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestingSessionLocal()
    set_session(session)
    try:
        yield session
    finally:
        set_session(None)
        session.close()


@pytest.fixture
def fake_s3():
    return FakeS3Client()


@pytest.fixture
def file_service(fake_s3):
    return FileService(s3_client=fake_s3)


@pytest.fixture
def client(db_session, file_service):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_file_service] = lambda: file_service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()

