"""Static metadata describing TimeTrigger."""

APP_NAME = "TimeTrigger"
APP_VERSION = "0.1"
APP_ORGANIZATION = "TimeTrigger"
