from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from countdown_app.core.countdown_controller import CountdownController
from countdown_app.core.models import RemainingTime
from countdown_app.core.services.notification_scheduler import InMemoryNotificationScheduler
from countdown_app.core.services.settings_store import InMemorySettingsStore
from countdown_app.core.services.tick_scheduler import ManualTickScheduler


START_TIME = datetime(2025, 7, 20, 12, 0, 0, tzinfo=timezone.utc)


class FakeClock:
    def __init__(self, start: datetime = START_TIME) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


class RecordingListener:
    def __init__(self) -> None:
        self.remaining: list[RemainingTime] = []
        self.invalid_messages: list[str] = []
        self.completed_count = 0

    def on_remaining(self, remaining: RemainingTime) -> None:
        self.remaining.append(remaining)

    def on_invalid_duration(self, message: str) -> None:
        self.invalid_messages.append(message)

    def on_completed(self) -> None:
        self.completed_count += 1


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> InMemorySettingsStore:
    return InMemorySettingsStore()


@pytest.fixture
def notifications() -> InMemoryNotificationScheduler:
    return InMemoryNotificationScheduler()


@pytest.fixture
def ticks() -> ManualTickScheduler:
    return ManualTickScheduler()


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()


@pytest.fixture
def controller(store, notifications, ticks, listener, clock) -> CountdownController:
    return CountdownController(store, notifications, ticks, listener=listener, clock=clock)
