"""Centralized stylesheets for the countdown window."""

from countdown_app.constants.ui_constants import (
    BUTTON_BORDER_WIDTH_PX,
    BUTTON_CORNER_RADIUS_PX,
    COUNTDOWN_FONT_POINT_SIZE,
)

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-size: 14px;
            }}
            QComboBox {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 4px;
            }}
        """

    @staticmethod
    def get_action_button_style(theme: Theme = Theme.LIGHT) -> str:
        accent = ColorPalette.ACCENT_PRIMARY.get(theme)
        return f"""
            QPushButton {{
                color: {accent};
                border: {BUTTON_BORDER_WIDTH_PX}px solid {accent};
                border-radius: {BUTTON_CORNER_RADIUS_PX}px;
                padding: 8px 20px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
        """

    @staticmethod
    def get_countdown_label_style() -> str:
        return f"font-size: {COUNTDOWN_FONT_POINT_SIZE}pt;"
