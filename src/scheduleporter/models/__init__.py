"""Data models for SchedulePorter."""

from .schedule import CellValue, ExportResult, ScheduleResult, ScheduleRow, ScheduleTable

__all__ = [
    "CellValue",
    "ScheduleRow",
    "ScheduleTable",
    "ScheduleResult",
    "ExportResult",
]
