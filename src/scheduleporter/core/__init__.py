"""Core constants and exceptions for SchedulePorter."""

from .constants import (
    COMBINED,
    FILES,
    QUANTITIES,
    SCHEDULE_NAMES,
    UNITS,
)
from .exceptions import (
    ConfigurationError,
    ExportWriteError,
    HostAPIError,
    SchedulePorterError,
)

__all__ = [
    "COMBINED",
    "FILES",
    "QUANTITIES",
    "SCHEDULE_NAMES",
    "UNITS",
    "SchedulePorterError",
    "HostAPIError",
    "ExportWriteError",
    "ConfigurationError",
]
