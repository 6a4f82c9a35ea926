"""Countdown lifecycle: validation, persistence, ticking and notification."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
import logging
import math
from typing import Callable, Protocol

from countdown_app.constants.countdown_constants import (
    HOUR_CHOICES,
    MINUTE_CHOICES,
    SECOND_CHOICES,
)
from countdown_app.core.config import CountdownConfig
from countdown_app.core.models import CountdownState, RemainingTime
from countdown_app.core.services.errors import HostServiceError
from countdown_app.core.services.notification_scheduler import NotificationScheduler
from countdown_app.core.services.settings_store import SettingsStore
from countdown_app.core.services.tick_scheduler import TickHandle, TickScheduler

logger = logging.getLogger(__name__)


class InvalidDurationError(ValueError):
    """Raised when the selected duration falls outside the allowed range."""

    def __init__(self, duration_seconds: int, message: str) -> None:
        super().__init__(message)
        self.duration_seconds = duration_seconds
        self.message = message


class CountdownListener(Protocol):
    """UI collaborator notified about countdown changes."""

    def on_remaining(self, remaining: RemainingTime) -> None: ...

    def on_invalid_duration(self, message: str) -> None: ...

    def on_completed(self) -> None: ...


class NullCountdownListener:
    def on_remaining(self, remaining: RemainingTime) -> None:
        pass

    def on_invalid_duration(self, message: str) -> None:
        pass

    def on_completed(self) -> None:
        pass


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_end_timestamp(value: str) -> datetime | None:
    """Parse a persisted ISO-8601 end timestamp; naive values are taken as UTC."""
    try:
        parsed = datetime.fromisoformat(value)
    except (TypeError, ValueError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class CountdownController:
    """Owns the single countdown and its persisted end timestamp.

    The end timestamp is stored under ``config.storage_key`` exactly while a
    countdown is running; stop, expiry and stale restores remove the key.
    """

    def __init__(
        self,
        store: SettingsStore,
        notifications: NotificationScheduler,
        ticks: TickScheduler,
        listener: CountdownListener | None = None,
        clock: Callable[[], datetime] = utc_now,
        config: CountdownConfig | None = None,
    ) -> None:
        self._store = store
        self._notifications = notifications
        self._ticks = ticks
        self._listener: CountdownListener = listener or NullCountdownListener()
        self._clock = clock
        self._config = config or CountdownConfig()

        self._end_timestamp: datetime | None = None
        self._tick_handle: TickHandle | None = None

    # --- Public API ---

    @property
    def config(self) -> CountdownConfig:
        return self._config

    @property
    def state(self) -> CountdownState:
        return CountdownState.RUNNING if self._end_timestamp is not None else CountdownState.IDLE

    def is_running(self) -> bool:
        return self._end_timestamp is not None

    @property
    def end_timestamp(self) -> datetime | None:
        return self._end_timestamp

    def set_listener(self, listener: CountdownListener | None) -> None:
        self._listener = listener or NullCountdownListener()

    def validate_selection(self, hour: int, minute: int, second: int) -> int:
        """Return the duration in seconds or raise ``InvalidDurationError``."""
        duration = hour * 3600 + minute * 60 + second
        message = f"duration must be {self._config.describe_bounds()}"
        if hour not in HOUR_CHOICES or minute not in MINUTE_CHOICES or second not in SECOND_CHOICES:
            raise InvalidDurationError(duration, message)
        if not self._config.min_duration_seconds <= duration <= self._config.max_duration_seconds:
            raise InvalidDurationError(duration, message)
        return duration

    def start(self, hour: int, minute: int, second: int) -> int:
        duration = self.validate_selection(hour, minute, second)

        now = self._clock()
        self._end_timestamp = now + timedelta(seconds=duration)
        self._persist_end_timestamp(self._end_timestamp)
        self._start_ticking()
        self._schedule_notification(duration)

        logger.info("Countdown started: %ss, ends at %s", duration, self._end_timestamp.isoformat())
        self._listener.on_remaining(RemainingTime.from_seconds(duration))
        return duration

    def try_start(self, hour: int, minute: int, second: int) -> bool:
        try:
            self.start(hour, minute, second)
        except InvalidDurationError as exc:
            logger.warning("Rejected duration of %ss: %s", exc.duration_seconds, exc.message)
            self._listener.on_invalid_duration(exc.message)
            return False
        return True

    def stop(self) -> None:
        was_running = self.is_running()
        self._stop_ticking()
        self._end_timestamp = None
        self._clear_end_timestamp()
        self._cancel_notifications()
        if was_running:
            logger.info("Countdown stopped")
        self._listener.on_remaining(RemainingTime.zero())

    def remaining(self) -> RemainingTime:
        """Remaining time right now, without side effects."""
        if self._end_timestamp is None:
            return RemainingTime.zero()
        return RemainingTime.from_seconds(self._remaining_seconds(self._end_timestamp))

    def tick(self) -> RemainingTime:
        if self._end_timestamp is None:
            return RemainingTime.zero()

        delta = (self._end_timestamp - self._clock()).total_seconds()
        if delta <= 0:
            self._expire()
            return RemainingTime.zero()

        remaining = RemainingTime.from_seconds(int(delta))
        self._listener.on_remaining(remaining)
        return remaining

    def restore_on_launch(self) -> CountdownState:
        raw_value = self._read_end_timestamp()
        if raw_value is None:
            return self.state

        saved_end = parse_end_timestamp(raw_value)
        if saved_end is None:
            logger.warning("Discarding unreadable persisted end timestamp %r", raw_value)
            self._clear_end_timestamp()
            return self.state

        if saved_end <= self._clock():
            logger.info("Discarding stale countdown that ended at %s", saved_end.isoformat())
            self._clear_end_timestamp()
            return self.state

        self._end_timestamp = saved_end
        self._start_ticking()
        if self._config.reschedule_on_restore:
            delay = math.ceil((saved_end - self._clock()).total_seconds())
            self._schedule_notification(max(1, delay))
        logger.info("Restored countdown ending at %s", saved_end.isoformat())
        self.tick()
        return self.state

    # --- Internals ---

    def _remaining_seconds(self, end: datetime) -> int:
        return max(0, int((end - self._clock()).total_seconds()))

    def _expire(self) -> None:
        self._stop_ticking()
        self._end_timestamp = None
        self._clear_end_timestamp()
        logger.info("Countdown completed")
        self._listener.on_remaining(RemainingTime.zero())
        self._listener.on_completed()

    def _start_ticking(self) -> None:
        self._stop_ticking()
        self._tick_handle = self._ticks.start_repeating(
            self._config.tick_interval_seconds, self.tick
        )

    def _stop_ticking(self) -> None:
        if self._tick_handle is not None:
            self._tick_handle.cancel()
            self._tick_handle = None

    def _read_end_timestamp(self) -> str | None:
        try:
            return self._store.get(self._config.storage_key)
        except HostServiceError as exc:
            logger.warning("Could not read persisted countdown: %s", exc)
            return None

    def _persist_end_timestamp(self, end: datetime) -> None:
        try:
            self._store.set(self._config.storage_key, end.isoformat())
        except HostServiceError as exc:
            logger.warning("Could not persist countdown end timestamp: %s", exc)

    def _clear_end_timestamp(self) -> None:
        try:
            self._store.remove(self._config.storage_key)
        except HostServiceError as exc:
            logger.warning("Could not clear persisted countdown: %s", exc)

    def _schedule_notification(self, delay_seconds: int) -> None:
        try:
            self._notifications.schedule(
                self._config.notification_identifier,
                delay_seconds,
                self._config.notification_content(),
            )
        except HostServiceError as exc:
            logger.warning("Could not schedule completion notification: %s", exc)

    def _cancel_notifications(self) -> None:
        try:
            self._notifications.cancel_all()
        except HostServiceError as exc:
            logger.warning("Could not cancel pending notifications: %s", exc)
