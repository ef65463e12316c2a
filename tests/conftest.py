"""Shared fixtures for build logger tests."""

from datetime import datetime
import pytest


class RecordingEventSource:
    """Minimal event source: keeps subscriptions and replays events."""

    def __init__(self):
        self.subscribers = {}

    def subscribe(self, kind, callback):
        self.subscribers.setdefault(kind, []).append(callback)

    def raise_event(self, kind, event):
        for callback in self.subscribers.get(kind, []):
            callback(event)


@pytest.fixture
def event_source():
    return RecordingEventSource()


@pytest.fixture
def fixed_clock():
    return lambda: datetime(2026, 10, 19, 12, 30, 5)
