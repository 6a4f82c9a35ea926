"""Local completion notifications delivered through the system tray."""

from __future__ import annotations

from functools import partial
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from PySide6.QtCore import QObject, QTimer, QUrl
from PySide6.QtWidgets import QApplication, QSystemTrayIcon

from countdown_app.core.models import NotificationContent
from countdown_app.core.services.errors import HostServiceError

if TYPE_CHECKING:
    from PySide6.QtMultimedia import QSoundEffect

logger = logging.getLogger(__name__)

# QTimer intervals are signed 32-bit milliseconds
_MAX_DELAY_MS = 2**31 - 1


class TrayNotificationScheduler(QObject):
    """One single-shot timer per identifier; firing shows a tray balloon.

    Pending notifications live only as long as the process does, which is
    why the controller re-registers them when it restores a countdown.
    """

    def __init__(
        self,
        tray_icon: QSystemTrayIcon | None = None,
        sound_path: str | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._tray_icon = tray_icon
        self._timers: dict[str, QTimer] = {}
        self._sound_effect = self._load_sound(sound_path)

    def schedule(
        self, identifier: str, delay_seconds: float, content: NotificationContent
    ) -> None:
        delay_ms = int(delay_seconds * 1000)
        if delay_ms < 0 or delay_ms > _MAX_DELAY_MS:
            raise HostServiceError(f"Cannot schedule notification {delay_seconds}s ahead")

        self._cancel(identifier)
        timer = QTimer(self)
        timer.setSingleShot(True)
        timer.setInterval(delay_ms)
        timer.timeout.connect(partial(self._deliver, identifier, content))
        timer.start()
        self._timers[identifier] = timer
        logger.debug("Notification %r scheduled in %ss", identifier, delay_seconds)

    def cancel_all(self) -> None:
        for identifier in list(self._timers):
            self._cancel(identifier)

    def _cancel(self, identifier: str) -> None:
        timer = self._timers.pop(identifier, None)
        if timer is not None:
            timer.stop()
            timer.deleteLater()

    def _deliver(self, identifier: str, content: NotificationContent) -> None:
        timer = self._timers.pop(identifier, None)
        if timer is not None:
            timer.deleteLater()

        if self._tray_icon is not None and QSystemTrayIcon.supportsMessages():
            self._tray_icon.showMessage(
                content.title, content.body, QSystemTrayIcon.MessageIcon.Information
            )
        else:
            logger.warning("System tray messages unavailable; notification %r not shown", identifier)

        if content.play_sound:
            if self._sound_effect is not None:
                self._sound_effect.play()
            else:
                QApplication.beep()

    def _load_sound(self, path_setting: str | None) -> QSoundEffect | None:
        if not path_setting:
            return None
        sound_path = Path(path_setting)
        if not sound_path.is_absolute():
            # countdown_app/host/<this file> -> project root
            project_root = Path(__file__).resolve().parents[2]
            sound_path = project_root / sound_path
        if not sound_path.exists():
            logger.warning("Completion sound not found at %s", sound_path)
            return None
        # QtMultimedia is only loaded when a sound file is configured
        from PySide6.QtMultimedia import QSoundEffect

        effect = QSoundEffect(self)
        effect.setSource(QUrl.fromLocalFile(str(sound_path)))
        effect.setVolume(0.6)
        return effect
