import os
import sys
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Keep the module-level engine off the working directory
os.environ.setdefault("USER_SERVICE_DATABASE_URL", "sqlite:///:memory:")

# Now import after path is set
from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import models  # noqa: F401
from database import Base, get_db
from dependencies import get_notification_publisher
from main import create_app
from services.notification_publisher import UserNotificationPublisher


@pytest.fixture
def engine():
    """In-memory database shared by every session of one test"""
    engine = create_engine(
        'sqlite:///:memory:',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine)


@pytest.fixture
def db_session(session_factory):
    """Create in-memory database session for testing"""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def publisher():
    return UserNotificationPublisher()


@pytest.fixture
def received(publisher):
    """Payloads delivered to a subscriber on the test publisher"""
    payloads = []
    publisher.subscribe(payloads.append)
    return payloads


class FakeClock:
    """Deterministic clock; each call advances by one second."""

    def __init__(self, start=datetime(2024, 1, 1, 12, 0, 0)):
        self.current = start

    def __call__(self):
        value = self.current
        self.current = self.current + timedelta(seconds=1)
        return value


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def app(session_factory, publisher):
    app = create_app(init_db=False)

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_notification_publisher] = lambda: publisher
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
