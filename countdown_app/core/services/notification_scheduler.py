"""Scheduling of the one-shot completion notification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from countdown_app.core.models import NotificationContent


class NotificationScheduler(Protocol):
    """Fire-and-forget local notification service.

    Registering an identifier that is already pending replaces the earlier
    request, so at most one notification per identifier is ever pending.
    """

    def schedule(
        self, identifier: str, delay_seconds: float, content: NotificationContent
    ) -> None: ...

    def cancel_all(self) -> None: ...


@dataclass(slots=True)
class PendingNotification:
    identifier: str
    delay_seconds: float
    content: NotificationContent


class InMemoryNotificationScheduler:
    """Records pending requests without delivering them."""

    def __init__(self) -> None:
        self._pending: dict[str, PendingNotification] = {}
        self.schedule_count: int = 0

    def schedule(
        self, identifier: str, delay_seconds: float, content: NotificationContent
    ) -> None:
        self._pending[identifier] = PendingNotification(identifier, delay_seconds, content)
        self.schedule_count += 1

    def cancel_all(self) -> None:
        self._pending.clear()

    def get_pending(self) -> list[PendingNotification]:
        return list(self._pending.values())

    def get(self, identifier: str) -> PendingNotification | None:
        return self._pending.get(identifier)
