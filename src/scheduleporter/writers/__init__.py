"""Output writers for SchedulePorter."""

from .json_writer import (
    sanitize_file_name,
    write_combined_json,
    write_debug_log,
    write_json,
    write_schedule_json,
)

__all__ = [
    "sanitize_file_name",
    "write_combined_json",
    "write_debug_log",
    "write_json",
    "write_schedule_json",
]
