"""Text helpers for presenting countdown values."""

from __future__ import annotations

from countdown_app.constants.ui_constants import (
    HOURS_UNIT_LABEL,
    INVALID_DURATION_TEMPLATE,
    MINUTES_UNIT_LABEL,
    SECONDS_UNIT_LABEL,
)
from countdown_app.core.models import RemainingTime


def decompose_seconds(total_seconds: int) -> tuple[int, int, int]:
    """Split whole seconds into ``(hours, minutes, seconds)``; negatives clamp to zero."""
    return RemainingTime.from_seconds(total_seconds).as_tuple()


def countdown_parts(remaining: RemainingTime) -> list[tuple[str, str]]:
    """Return ``(number, unit)`` pairs with numbers zero-padded to two digits."""
    return [
        (f"{remaining.hours:02d}", HOURS_UNIT_LABEL),
        (f"{remaining.minutes:02d}", MINUTES_UNIT_LABEL),
        (f"{remaining.seconds:02d}", SECONDS_UNIT_LABEL),
    ]


def format_countdown_text(remaining: RemainingTime) -> str:
    return "   ".join(f"{number} {unit}" for number, unit in countdown_parts(remaining))


def format_countdown_html(remaining: RemainingTime) -> str:
    """Rich-text variant used by the Qt label: bold numbers, regular units."""
    return "&nbsp;&nbsp;&nbsp;".join(
        f"<b>{number}</b> {unit}" for number, unit in countdown_parts(remaining)
    )


def picker_label(value: int, suffix: str) -> str:
    return f"{value} {suffix}"


def invalid_duration_text(bounds: str) -> str:
    """Alert text for a rejected duration, e.g. ``bounds="5–90 minutes"``."""
    return INVALID_DURATION_TEMPLATE.format(bounds=bounds)
