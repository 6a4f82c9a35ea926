"""Countdown-related constants shared across UI and core layers."""

MIN_DURATION_SECONDS: int = 300
MAX_DURATION_SECONDS: int = 5400
TICK_INTERVAL_SECONDS: float = 1.0

HOUR_CHOICES: range = range(0, 24)
MINUTE_CHOICES: range = range(0, 60)
SECOND_CHOICES: range = range(0, 60)

END_DATE_KEY: str = "endDate"
NOTIFICATION_IDENTIFIER: str = "timerDone"
NOTIFICATION_TITLE: str = "⏰ Timer Completed!"
NOTIFICATION_BODY: str = "Your countdown has ended."
RESCHEDULE_ON_RESTORE: bool = True
COMPLETION_SOUND_PATH: str | None = None
