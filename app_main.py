"""Application entry point for TimeTrigger."""

from __future__ import annotations

import sys

from PySide6.QtCore import QSettings
from PySide6.QtWidgets import QApplication, QStyle, QSystemTrayIcon

from countdown_app.constants.about import APP_NAME, APP_ORGANIZATION, APP_VERSION
from countdown_app.constants.countdown_constants import COMPLETION_SOUND_PATH
from countdown_app.core.config import CountdownConfig
from countdown_app.core.countdown_controller import CountdownController
from countdown_app.host.qt_settings_store import QtSettingsStore
from countdown_app.host.qt_tick_scheduler import QtTickScheduler
from countdown_app.host.tray_notification_scheduler import TrayNotificationScheduler
from countdown_app.ui.countdown_window import CountdownWindow
from countdown_app.utils.logging_config import configure_logging


def _create_tray_icon(app: QApplication) -> QSystemTrayIcon | None:
    """Best-effort tray icon used to surface completion notifications."""
    if not QSystemTrayIcon.isSystemTrayAvailable():
        return None
    icon = app.style().standardIcon(QStyle.StandardPixmap.SP_MessageBoxInformation)
    tray_icon = QSystemTrayIcon(icon, app)
    tray_icon.setToolTip(APP_NAME)
    tray_icon.show()
    return tray_icon


def main() -> None:
    """Initialize logging, wire the countdown services, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting %s %s", APP_NAME, APP_VERSION)

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(APP_ORGANIZATION)

    tray_icon = _create_tray_icon(app)
    if tray_icon is None:
        logger.warning("System tray unavailable; completion notifications fall back to a beep")

    controller = CountdownController(
        store=QtSettingsStore(QSettings(APP_ORGANIZATION, APP_NAME)),
        notifications=TrayNotificationScheduler(tray_icon, COMPLETION_SOUND_PATH, parent=app),
        ticks=QtTickScheduler(parent=app),
        config=CountdownConfig(),
    )
    window = CountdownWindow(controller)
    window.restore_countdown()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
