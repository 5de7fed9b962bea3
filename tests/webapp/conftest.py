"""Pytest fixtures for webapp tests."""

import pytest

from toclickornot.webapp.config import TestConfig
from toclickornot.webapp.extensions import db


class FakeClock:
    """Clock that moves forward by a fixed step each time it is read."""

    def __init__(self, start=1_000, step=1_000):
        self.now = start
        self.step = step

    def __call__(self):
        self.now += self.step
        return self.now


@pytest.fixture
def app():
    """Create test application."""
    from toclickornot.webapp import create_app

    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.drop_all()


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def service(app):
    """The app's game service."""
    return app.extensions["game_service"]


@pytest.fixture
def clock(service):
    """Install a clock that keeps clicks one second apart."""
    fake = FakeClock()
    service.clock = fake
    return fake


@pytest.fixture
def deadly_service(service, make_catalog):
    """Service whose every situation drains 50 health, so one click kills."""
    service.catalog = make_catalog(effects={"health": -50})
    return service


@pytest.fixture
def neutral_service(service, neutral_catalog):
    """Service whose situations never change any stat."""
    service.catalog = neutral_catalog
    return service
