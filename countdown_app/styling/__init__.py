"""Styling module for TimeTrigger."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
