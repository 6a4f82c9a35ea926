"""Qt UI components for the countdown application."""

from .countdown_window import CountdownWindow
from .dialog_helpers import show_info, show_warning

__all__ = [
    "CountdownWindow",
    "show_info",
    "show_warning",
]
