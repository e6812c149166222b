"""Utility functions for SchedulePorter."""

from .logging_context import (
    DebugTrace,
    DocumentContext,
    OperationContext,
    ScheduleContext,
    get_contextual_logger,
    setup_logging,
)

__all__ = [
    "DebugTrace",
    "DocumentContext",
    "OperationContext",
    "ScheduleContext",
    "get_contextual_logger",
    "setup_logging",
]
