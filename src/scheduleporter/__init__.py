"""SchedulePorter - Revit schedule export to JSON."""

__version__ = "0.1.0"

from scheduleporter.command import CommandResult, CommandStatus, execute, run_export
from scheduleporter.config import Config
from scheduleporter.models import ExportResult, ScheduleResult, ScheduleTable
from scheduleporter.scheduleporter import SchedulePorter, build_summary_message

__all__ = [
    "SchedulePorter",
    "Config",
    "CommandResult",
    "CommandStatus",
    "ExportResult",
    "ScheduleResult",
    "ScheduleTable",
    "build_summary_message",
    "execute",
    "run_export",
]
