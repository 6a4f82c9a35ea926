"""Key-value settings storage used to persist the countdown end timestamp."""

from __future__ import annotations

from typing import Protocol


class SettingsStore(Protocol):
    """Process-wide string key-value store."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class InMemorySettingsStore:
    """Dictionary-backed store for headless runs and tests."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

    def contains(self, key: str) -> bool:
        return key in self._values

    def snapshot(self) -> dict[str, str]:
        return dict(self._values)
