"""Color palette for TimeTrigger supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color pair for the two themes."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the countdown window."""

    TEXT_PRIMARY = ThemeColors(
        light="#000000",
        dark="#F5F5F5"
    )

    BACKGROUND_PRIMARY = ThemeColors(
        light="#FFFFFF",
        dark="#1E1E1E"
    )

    # Matches the system blue used for the start/stop button borders
    ACCENT_PRIMARY = ThemeColors(
        light="#007AFF",
        dark="#0A84FF"
    )

    BUTTON_HOVER_BG = ThemeColors(
        light="#E8F1FF",
        dark="#1C3250"
    )

    BORDER_PRIMARY = ThemeColors(
        light="#D1D1D1",
        dark="#555555"
    )
