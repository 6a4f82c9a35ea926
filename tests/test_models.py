from __future__ import annotations

import pytest
from pydantic import ValidationError

from countdown_app.core.config import CountdownConfig
from countdown_app.core.formatting import (
    decompose_seconds,
    format_countdown_html,
    format_countdown_text,
    invalid_duration_text,
    picker_label,
)
from countdown_app.core.models import RemainingTime


@pytest.mark.parametrize("total", [0, 1, 59, 60, 299, 3599, 3600, 5400, 86399])
def test_decomposition_recombines(total):
    hours, minutes, seconds = decompose_seconds(total)

    assert hours * 3600 + minutes * 60 + seconds == total
    assert 0 <= minutes < 60
    assert 0 <= seconds < 60


def test_negative_remaining_clamps_to_zero():
    assert RemainingTime.from_seconds(-5) == RemainingTime.zero()


def test_remaining_time_total_seconds():
    assert RemainingTime(1, 2, 3).total_seconds == 3723


def test_format_countdown_text():
    assert format_countdown_text(RemainingTime(0, 59, 59)) == "00 hours   59 min   59 sec"


def test_format_countdown_html_bolds_numbers():
    html = format_countdown_html(RemainingTime(1, 5, 0))
    assert html.startswith("<b>01</b> hours")
    assert "<b>05</b> min" in html
    assert html.endswith("<b>00</b> sec")


def test_picker_label():
    assert picker_label(23, "h") == "23 h"


def test_config_defaults():
    config = CountdownConfig()

    assert config.min_duration_seconds == 300
    assert config.max_duration_seconds == 5400
    assert config.storage_key == "endDate"
    assert config.notification_identifier == "timerDone"
    assert config.describe_bounds() == "5–90 minutes"


def test_config_rejects_inverted_bounds():
    with pytest.raises(ValidationError):
        CountdownConfig(min_duration_seconds=600, max_duration_seconds=300)


def test_config_rejects_non_positive_tick_interval():
    with pytest.raises(ValidationError):
        CountdownConfig(tick_interval_seconds=0)


def test_config_is_frozen():
    config = CountdownConfig()
    with pytest.raises(ValidationError):
        config.storage_key = "other"


def test_config_describes_second_bounds():
    config = CountdownConfig(min_duration_seconds=90, max_duration_seconds=600)
    assert config.describe_bounds() == "90–600 seconds"


def test_notification_content_follows_config():
    content = CountdownConfig(notification_sound=False).notification_content()
    assert content.title == "⏰ Timer Completed!"
    assert content.play_sound is False


def test_invalid_duration_text_follows_configured_bounds():
    default_bounds = CountdownConfig().describe_bounds()
    custom_bounds = CountdownConfig(
        min_duration_seconds=60, max_duration_seconds=1200
    ).describe_bounds()

    assert invalid_duration_text(default_bounds) == "Please select a duration of 5–90 minutes."
    assert invalid_duration_text(custom_bounds) == "Please select a duration of 1–20 minutes."
