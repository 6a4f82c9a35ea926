"""``QSettings``-backed implementation of the settings store."""

from __future__ import annotations

from PySide6.QtCore import QSettings

from countdown_app.core.services.errors import HostServiceError


class QtSettingsStore:
    """Persists string values in the platform settings backend."""

    def __init__(self, settings: QSettings) -> None:
        self._settings = settings

    def get(self, key: str) -> str | None:
        if not self._settings.contains(key):
            return None
        value = self._settings.value(key)
        return None if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        self._settings.setValue(key, value)
        self._sync()

    def remove(self, key: str) -> None:
        self._settings.remove(key)
        self._sync()

    def _sync(self) -> None:
        self._settings.sync()
        status = self._settings.status()
        if status != QSettings.Status.NoError:
            raise HostServiceError(f"QSettings sync failed with status {status}")
