"""
Shared pytest fixtures for the product notification manager tests.

These fixtures provide consistent test data and fresh state for every test.
"""

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from notify_core.config import DEFAULT_DATA_DIR, Settings
from notify_core.factory import NotificationFactory
from notify_core.store import EntityStore


class FrozenClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


@pytest.fixture
def data_dir() -> Path:
    """Path to the bundled sample data."""
    return DEFAULT_DATA_DIR


@pytest.fixture
def store() -> EntityStore:
    """Empty EntityStore for each test."""
    return EntityStore()


@pytest.fixture
def seeded_store(data_dir: Path) -> EntityStore:
    """
    EntityStore loaded with the sample fixtures.

    4 customers (ids 1-4), 4 active products (ids 1-4) and
    3 templates (ids 1-3).
    """
    store = EntityStore()
    store.load_fixtures(data_dir)
    return store


@pytest.fixture
def clock() -> FrozenClock:
    """Clock frozen at a fixed instant."""
    return FrozenClock(datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def factory(seeded_store: EntityStore, clock: FrozenClock) -> NotificationFactory:
    """NotificationFactory over the seeded store."""
    return NotificationFactory(seeded_store, clock=clock)


@pytest.fixture
def settings() -> Settings:
    """Settings that never seed data on their own."""
    return Settings(seed_sample_data=False, log_level="WARNING")


@pytest.fixture
def app(settings: Settings, seeded_store: EntityStore, clock: FrozenClock):
    """Application serving the seeded store."""
    return create_app(settings=settings, store=seeded_store, clock=clock)


@pytest.fixture
def api_client(app) -> TestClient:
    """Test client for the seeded application."""
    return TestClient(app)


@pytest.fixture
def empty_client(settings: Settings, store: EntityStore, clock: FrozenClock) -> TestClient:
    """Test client for an application with no data."""
    return TestClient(create_app(settings=settings, store=store, clock=clock))


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def john_customer_id() -> int:
    """John Smith, john@example.com."""
    return 1


@pytest.fixture
def sarah_customer_id() -> int:
    """Sarah Johnson, sarah@example.com."""
    return 2


@pytest.fixture
def iphone_product_id() -> int:
    """iPhone 15 Pro."""
    return 1


@pytest.fixture
def launch_template_id() -> int:
    """Product Launch template (the default one)."""
    return 1


@pytest.fixture
def update_template_id() -> int:
    """Product Update template - uses customer.phoneNumber."""
    return 2
