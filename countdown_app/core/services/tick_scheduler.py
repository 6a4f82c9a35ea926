"""Repeating-task abstraction that drives the countdown tick."""

from __future__ import annotations

from typing import Callable, Protocol


class TickHandle(Protocol):
    def cancel(self) -> None: ...

    @property
    def active(self) -> bool: ...


class TickScheduler(Protocol):
    """Starts a callback that repeats every ``interval_seconds``."""

    def start_repeating(
        self, interval_seconds: float, callback: Callable[[], None]
    ) -> TickHandle: ...


class ManualTickHandle:
    def __init__(self, interval_seconds: float, callback: Callable[[], None]) -> None:
        self.interval_seconds = interval_seconds
        self._callback = callback
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        self._active = False

    def fire(self) -> None:
        if self._active:
            self._callback()


class ManualTickScheduler:
    """Tick scheduler advanced explicitly by the caller.

    Only handles that have not been cancelled receive ticks, so a replaced
    countdown never sees callbacks meant for its successor.
    """

    def __init__(self) -> None:
        self._handles: list[ManualTickHandle] = []

    def start_repeating(
        self, interval_seconds: float, callback: Callable[[], None]
    ) -> ManualTickHandle:
        handle = ManualTickHandle(interval_seconds, callback)
        self._handles.append(handle)
        return handle

    def fire(self, times: int = 1) -> None:
        for _ in range(times):
            for handle in list(self._handles):
                handle.fire()
            self._handles = [h for h in self._handles if h.active]

    def active_count(self) -> int:
        return sum(1 for handle in self._handles if handle.active)
