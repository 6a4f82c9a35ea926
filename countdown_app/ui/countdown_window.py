"""Qt main window hosting the countdown label, duration pickers and controls."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from countdown_app.constants.countdown_constants import (
    HOUR_CHOICES,
    MINUTE_CHOICES,
    SECOND_CHOICES,
)
from countdown_app.constants.ui_constants import (
    COMPLETED_MESSAGE,
    COMPLETED_TITLE,
    INVALID_DURATION_TITLE,
    PICKER_HOUR_SUFFIX,
    PICKER_MINUTE_SUFFIX,
    PICKER_SECOND_SUFFIX,
    START_BUTTON_TEXT,
    STOP_BUTTON_TEXT,
    WINDOW_TITLE,
)
from countdown_app.core.countdown_controller import CountdownController
from countdown_app.core.formatting import (
    format_countdown_html,
    invalid_duration_text,
    picker_label,
)
from countdown_app.core.models import CountdownState, RemainingTime
from countdown_app.styling.styles import Styles
from countdown_app.ui.dialog_helpers import show_info, show_warning


class CountdownWindow(QMainWindow):
    """Single-screen window; acts as the controller's listener."""

    def __init__(self, controller: CountdownController) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.controller = controller

        self._build_ui()
        self.setStyleSheet(Styles.get_main_window_style())
        self.controller.set_listener(self)
        self.on_remaining(RemainingTime.zero())

    def _build_ui(self) -> None:
        central = QWidget()
        layout = QVBoxLayout()
        central.setLayout(layout)
        self.setCentralWidget(central)

        self.countdown_label = QLabel()
        self.countdown_label.setTextFormat(Qt.RichText)
        self.countdown_label.setAlignment(Qt.AlignCenter)
        self.countdown_label.setStyleSheet(Styles.get_countdown_label_style())
        layout.addWidget(self.countdown_label)

        self.picker_container = QWidget()
        picker_row = QHBoxLayout()
        picker_row.setContentsMargins(0, 0, 0, 0)
        self.picker_container.setLayout(picker_row)
        self.hour_picker = self._build_picker(HOUR_CHOICES, PICKER_HOUR_SUFFIX)
        self.minute_picker = self._build_picker(MINUTE_CHOICES, PICKER_MINUTE_SUFFIX)
        self.second_picker = self._build_picker(SECOND_CHOICES, PICKER_SECOND_SUFFIX)
        for picker in (self.hour_picker, self.minute_picker, self.second_picker):
            picker_row.addWidget(picker)
        layout.addWidget(self.picker_container)

        button_row = QHBoxLayout()
        self.start_button = QPushButton(START_BUTTON_TEXT)
        self.stop_button = QPushButton(STOP_BUTTON_TEXT)
        for button in (self.start_button, self.stop_button):
            button.setStyleSheet(Styles.get_action_button_style())
            button_row.addWidget(button)
        self.start_button.clicked.connect(self._handle_start)
        self.stop_button.clicked.connect(self._handle_stop)
        layout.addLayout(button_row)

    @staticmethod
    def _build_picker(choices: range, suffix: str) -> QComboBox:
        picker = QComboBox()
        for value in choices:
            picker.addItem(picker_label(value, suffix), value)
        return picker

    def selected_duration(self) -> tuple[int, int, int]:
        return (
            int(self.hour_picker.currentData()),
            int(self.minute_picker.currentData()),
            int(self.second_picker.currentData()),
        )

    def restore_countdown(self) -> None:
        state = self.controller.restore_on_launch()
        self._set_pickers_visible(state is CountdownState.IDLE)

    # --- Listener callbacks ---

    def on_remaining(self, remaining: RemainingTime) -> None:
        self.countdown_label.setText(format_countdown_html(remaining))

    def on_invalid_duration(self, message: str) -> None:
        bounds = self.controller.config.describe_bounds()
        show_warning(self, INVALID_DURATION_TITLE, invalid_duration_text(bounds))

    def on_completed(self) -> None:
        self._set_pickers_visible(True)
        show_info(self, COMPLETED_TITLE, COMPLETED_MESSAGE)

    # --- Button handlers ---

    def _handle_start(self) -> None:
        hour, minute, second = self.selected_duration()
        if self.controller.try_start(hour, minute, second):
            self._set_pickers_visible(False)

    def _handle_stop(self) -> None:
        self.controller.stop()
        self._set_pickers_visible(True)

    def _set_pickers_visible(self, visible: bool) -> None:
        self.picker_container.setVisible(visible)

