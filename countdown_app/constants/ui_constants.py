"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "TimeTrigger"
START_BUTTON_TEXT: str = "Start"
STOP_BUTTON_TEXT: str = "Stop"

HOURS_UNIT_LABEL: str = "hours"
MINUTES_UNIT_LABEL: str = "min"
SECONDS_UNIT_LABEL: str = "sec"

PICKER_HOUR_SUFFIX: str = "h"
PICKER_MINUTE_SUFFIX: str = "m"
PICKER_SECOND_SUFFIX: str = "s"

INVALID_DURATION_TITLE: str = "Invalid Duration"
INVALID_DURATION_TEMPLATE: str = "Please select a duration of {bounds}."
COMPLETED_TITLE: str = "Done"
COMPLETED_MESSAGE: str = "Timer completed."

COUNTDOWN_FONT_POINT_SIZE: int = 20
BUTTON_CORNER_RADIUS_PX: int = 12
BUTTON_BORDER_WIDTH_PX: int = 2
