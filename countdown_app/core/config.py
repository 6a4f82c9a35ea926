"""Validated runtime configuration for the countdown controller."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from countdown_app.constants.countdown_constants import (
    END_DATE_KEY,
    MAX_DURATION_SECONDS,
    MIN_DURATION_SECONDS,
    NOTIFICATION_BODY,
    NOTIFICATION_IDENTIFIER,
    NOTIFICATION_TITLE,
    RESCHEDULE_ON_RESTORE,
    TICK_INTERVAL_SECONDS,
)
from countdown_app.core.models import NotificationContent


class CountdownConfig(BaseModel):
    """Limits, keys and notification text used by ``CountdownController``."""

    model_config = ConfigDict(frozen=True)

    min_duration_seconds: int = Field(default=MIN_DURATION_SECONDS, ge=1)
    max_duration_seconds: int = Field(default=MAX_DURATION_SECONDS, ge=1)
    tick_interval_seconds: float = Field(default=TICK_INTERVAL_SECONDS, gt=0)
    storage_key: str = Field(default=END_DATE_KEY, min_length=1)
    notification_identifier: str = Field(default=NOTIFICATION_IDENTIFIER, min_length=1)
    notification_title: str = NOTIFICATION_TITLE
    notification_body: str = NOTIFICATION_BODY
    notification_sound: bool = True
    reschedule_on_restore: bool = RESCHEDULE_ON_RESTORE

    @model_validator(mode="after")
    def _check_duration_bounds(self) -> CountdownConfig:
        if self.min_duration_seconds > self.max_duration_seconds:
            raise ValueError(
                "min_duration_seconds must not exceed max_duration_seconds"
            )
        return self

    def notification_content(self) -> NotificationContent:
        return NotificationContent(
            title=self.notification_title,
            body=self.notification_body,
            play_sound=self.notification_sound,
        )

    def describe_bounds(self) -> str:
        """Human-readable duration range, e.g. ``"5–90 minutes"``."""
        low = self.min_duration_seconds
        high = self.max_duration_seconds
        if low % 60 == 0 and high % 60 == 0:
            return f"{low // 60}–{high // 60} minutes"
        return f"{low}–{high} seconds"
