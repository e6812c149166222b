"""Context-aware logging utilities for SchedulePorter."""

import contextvars
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

PACKAGE_LOGGER_NAME = "scheduleporter"

# Context variables for tracking current processing context
current_document = contextvars.ContextVar[str | None]("current_document", default=None)
current_schedule = contextvars.ContextVar[str | None]("current_schedule", default=None)
current_operation = contextvars.ContextVar[str | None]("current_operation", default=None)


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that automatically includes context information."""

    def process(self, msg: str, kwargs: Mapping[str, Any]) -> tuple[str, Mapping[str, Any]]:
        """Add context information to log records."""
        # Get current context values
        document = current_document.get()
        schedule_name = current_schedule.get()
        operation = current_operation.get()

        # Build extra context
        extra = kwargs.get("extra", {})
        extra["raw_message"] = msg
        if document:
            extra["document"] = document
        if schedule_name:
            extra["schedule"] = schedule_name
        if operation:
            extra["operation"] = operation

        kwargs["extra"] = extra

        # Add context to message if not using structured logging
        context_parts = []
        if schedule_name:
            context_parts.append(f"schedule={schedule_name}")
        if operation:
            context_parts.append(f"op={operation}")

        if context_parts:
            context_str = f"[{', '.join(context_parts)}] "
            msg = context_str + msg

        return msg, kwargs


def get_contextual_logger(name: str) -> ContextualLogger:
    """Get a logger that automatically includes context information.

    Args:
        name: Logger name (usually __name__)

    Returns:
        ContextualLogger instance
    """
    base_logger = logging.getLogger(name)
    return ContextualLogger(base_logger, {})


class _VarContext:
    """Set a context variable for the duration of a ``with`` block."""

    var: contextvars.ContextVar[str | None]

    def __init__(self, value: str):
        self.value = value
        self.token = None

    def __enter__(self):
        self.token = self.var.set(self.value)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token:
            self.var.reset(self.token)


class DocumentContext(_VarContext):
    """Context manager for tracking the Revit document being exported."""

    var = current_document


class ScheduleContext(_VarContext):
    """Context manager for tracking the schedule being processed."""

    var = current_schedule


class OperationContext(_VarContext):
    """Context manager for tracking current operation."""

    var = current_operation


class TraceFormatter(logging.Formatter):
    """Formats records as the bare message, without the context prefix."""

    def format(self, record: logging.LogRecord) -> str:
        message = getattr(record, "raw_message", None)
        if message is None:
            message = record.getMessage()
        return str(message)


class _ThresholdForwarder(logging.Handler):
    """Passes records on to a parent logger's handlers."""

    def __init__(self, level: int, parent: logging.Logger):
        super().__init__(level)
        self.parent = parent

    def emit(self, record: logging.LogRecord) -> None:
        self.parent.handle(record)


class DebugTrace(logging.Handler):
    """Collects the plain-text trace of an export run.

    Attached to the package logger for the duration of a run, it keeps every
    INFO-and-above message in order so the trace can be written next to the
    exported files afterwards.

    When the configured level is stricter than the trace level, the package
    logger is opened up to INFO for the run and stops propagating. Records at
    or above the configured level are still forwarded to the parent's
    handlers, so the console and log file see only what they would have
    seen without the trace.

    Example:
        with DebugTrace() as trace:
            logger.info("Found schedule: 'Doors'")
        trace.write(Path("debug_log.txt"))
    """

    def __init__(self, level: int = logging.INFO, logger_name: str = PACKAGE_LOGGER_NAME):
        super().__init__(level)
        self.lines: list[str] = []
        self.setFormatter(TraceFormatter())
        self._logger = logging.getLogger(logger_name)
        self._previous_level: int | None = None
        self._previous_propagate = True
        self._forwarder: _ThresholdForwarder | None = None

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.lines.append(self.format(record))
        except Exception:
            self.handleError(record)

    def attach(self) -> "DebugTrace":
        """Start collecting records from the package logger."""
        self._logger.addHandler(self)

        threshold = self._logger.getEffectiveLevel()
        if threshold > self.level:
            self._previous_level = self._logger.level
            self._previous_propagate = self._logger.propagate
            self._logger.setLevel(self.level)

            if self._logger.propagate and self._logger.parent is not None:
                self._forwarder = _ThresholdForwarder(threshold, self._logger.parent)
                self._logger.addHandler(self._forwarder)
                self._logger.propagate = False
        return self

    def detach(self) -> None:
        """Stop collecting records."""
        self._logger.removeHandler(self)
        if self._forwarder is not None:
            self._logger.removeHandler(self._forwarder)
            self._forwarder = None
        if self._previous_level is not None:
            self._logger.setLevel(self._previous_level)
            self._logger.propagate = self._previous_propagate
            self._previous_level = None

    def __enter__(self) -> "DebugTrace":
        return self.attach()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.detach()

    def write(self, path: Path) -> Path:
        """Write the collected lines to ``path``."""
        from ..writers.json_writer import write_debug_log

        return write_debug_log(self.lines, path)


def setup_logging(level: str = "INFO", log_file: Path | None = None) -> None:
    """Set up logging with the structured context format.

    This should be called once when the command starts. The package logger
    gets the level as well, since a host that already configured the root
    logger makes ``basicConfig`` a no-op.
    """
    log_level = getattr(logging, level.upper())
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        filename=log_file,
    )
    logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(log_level)
