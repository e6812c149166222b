"""Writers for the per-schedule and combined JSON files."""

import json
from pathlib import Path
from typing import Any

from ..core.constants import FILES
from ..core.exceptions import ExportWriteError
from ..models.schedule import ScheduleRow
from ..utils.logging_context import get_contextual_logger

logger = get_contextual_logger(__name__)


def sanitize_file_name(file_name: str) -> str:
    """
    Make a schedule name safe to use as a file name.

    Characters Windows rejects in file names become underscores, as do
    spaces. Brackets of every kind are removed.

    Args:
        file_name: Schedule name

    Returns:
        Sanitized name, without extension
    """
    sanitized = "".join(
        "_" if ch in FILES.INVALID_FILENAME_CHARS or ord(ch) < 32 else ch for ch in file_name
    )
    sanitized = sanitized.replace(" ", "_")
    for ch in FILES.REMOVED_FILENAME_CHARS:
        sanitized = sanitized.replace(ch, "")
    return sanitized


def write_json(data: Any, path: Path, indent: int = 2) -> Path:
    """Write ``data`` as indented UTF-8 JSON."""
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=indent, ensure_ascii=False)
    except (OSError, TypeError, ValueError) as e:
        raise ExportWriteError(f"Could not write {path}: {e}") from e
    return path


def write_schedule_json(
    rows: list[ScheduleRow], output_dir: Path, schedule_name: str, indent: int = 2
) -> Path:
    """
    Write one schedule's rows to ``<sanitized name>.json``.

    Args:
        rows: Rows to write
        output_dir: Target directory
        schedule_name: Schedule name used for the file name
        indent: JSON indentation

    Returns:
        Path of the written file
    """
    path = output_dir / f"{sanitize_file_name(schedule_name)}{FILES.JSON_SUFFIX}"
    write_json(rows, path, indent=indent)
    logger.debug(f"Wrote {len(rows)} rows to {path}")
    return path


def write_combined_json(
    data: dict[str, list[ScheduleRow]],
    output_dir: Path,
    prefix: str,
    timestamp: str,
    indent: int = 2,
) -> Path | None:
    """
    Write a combined document of several schedules.

    Args:
        data: Rows keyed by schedule name
        output_dir: Target directory
        prefix: File name prefix, e.g. ``combined_json_full``
        timestamp: Timestamp appended to the prefix
        indent: JSON indentation

    Returns:
        Path of the written file, or None if ``data`` is empty
    """
    if not data:
        return None

    path = output_dir / f"{prefix}_{timestamp}{FILES.JSON_SUFFIX}"
    write_json(data, path, indent=indent)
    logger.info(f"Created {prefix} with {len(data)} schedules: {', '.join(data)}")
    return path


def write_debug_log(lines: list[str], path: Path) -> Path:
    """Write the debug trace, one entry per line."""
    try:
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    except OSError as e:
        raise ExportWriteError(f"Could not write debug log {path}: {e}") from e
    return path
