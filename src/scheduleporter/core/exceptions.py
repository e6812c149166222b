"""Custom exceptions for SchedulePorter."""


class SchedulePorterError(Exception):
    """Base exception for all SchedulePorter errors."""

    pass


class HostAPIError(SchedulePorterError):
    """Raised when the Revit API is unavailable or a host call fails."""

    pass


class ExportWriteError(SchedulePorterError):
    """Raised when an output file cannot be written."""

    pass


class ConfigurationError(SchedulePorterError):
    """Raised when configuration is invalid."""

    pass
