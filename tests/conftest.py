"""
Test configuration and fixtures.
"""

import pytest
from fastapi.testclient import TestClient

from Info_app.config import Settings
from Info_app.errors import SubscriberClosed
from Info_app.main import create_app
from Info_app.realtime import Broadcaster
from Info_app.service import InfoService
from Info_app.store import KVStore


class RecordingSubscriber:
    """Stand-in subscriber that keeps every offered message."""

    def __init__(self):
        self.messages = []

    def offer(self, message):
        self.messages.append(message)


class ClosedSubscriber:
    """Stand-in subscriber whose connection is already gone."""

    def __init__(self):
        self.attempts = 0

    def offer(self, message):
        self.attempts += 1
        raise SubscriberClosed("gone")


@pytest.fixture
def store():
    """Create a fresh, empty store."""
    return KVStore()


@pytest.fixture
def broadcaster():
    return Broadcaster(queue_size=10)


@pytest.fixture
def service(store, broadcaster):
    return InfoService(store, broadcaster)


@pytest.fixture
def settings():
    return Settings(subscriber_queue_size=10)


@pytest.fixture
def app(settings, store, broadcaster):
    return create_app(settings=settings, store=store, broadcaster=broadcaster)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
