"""Configuration defaults and environment lookups."""

import os

DEFAULT_TITLE = "NewConnection"
DEFAULT_TIME_OFFSET = "0"
DEFAULT_TIME_UNITS = "ms"
DEFAULT_LOG_LEVEL = "WARNING"

LOG_LEVEL_ENV = "QLOGVIEW_LOG_LEVEL"

# Field names a declaration may use for the event timestamp and event type.
TIME_FIELDS = ("time", "relative_time")
NAME_FIELDS = ("name", "event", "event_type")


def get_log_level() -> str:
    """Get the log level (QLOGVIEW_LOG_LEVEL, defaults to WARNING).

    Returns:
        Upper-cased log level name.
    """
    return os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
