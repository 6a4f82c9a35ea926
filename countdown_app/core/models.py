"""Domain models for the countdown application."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class CountdownState(Enum):
    """Lifecycle of the single countdown."""

    IDLE = auto()
    RUNNING = auto()


@dataclass(frozen=True, slots=True)
class RemainingTime:
    """Remaining countdown time split into clock components."""

    hours: int
    minutes: int
    seconds: int

    @classmethod
    def from_seconds(cls, total_seconds: int) -> RemainingTime:
        total_seconds = max(0, int(total_seconds))
        return cls(
            hours=total_seconds // 3600,
            minutes=(total_seconds % 3600) // 60,
            seconds=total_seconds % 60,
        )

    @classmethod
    def zero(cls) -> RemainingTime:
        return cls(hours=0, minutes=0, seconds=0)

    @property
    def total_seconds(self) -> int:
        return self.hours * 3600 + self.minutes * 60 + self.seconds

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.hours, self.minutes, self.seconds)


@dataclass(frozen=True, slots=True)
class NotificationContent:
    """Payload handed to the notification scheduler."""

    title: str
    body: str
    play_sound: bool = True
