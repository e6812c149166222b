"""Main SchedulePorter class."""

import time
from datetime import datetime
from pathlib import Path
from typing import Any

from .config import Config
from .core.constants import COMBINED, FILES
from .models import ExportResult, ScheduleResult, ScheduleRow
from .readers import BaseReader
from .tools.extraction import extract_schedule
from .tools.formatting import apply_custom_formatting, clean_schedule_data
from .utils.logging_context import (
    DebugTrace,
    DocumentContext,
    ScheduleContext,
    get_contextual_logger,
    setup_logging,
)
from .writers import write_combined_json, write_schedule_json

logger = get_contextual_logger(__name__)


class SchedulePorter:
    """Exports the schedules of a Revit document to JSON files."""

    def __init__(self, config: Config | None = None, **kwargs):
        """Initialize SchedulePorter.

        Args:
            config: Configuration object. If None, loads from environment.
            **kwargs: Config overrides
        """
        # Load base config
        if config is None:
            config = Config.from_env()

        # Apply any additional kwargs
        for key, value in kwargs.items():
            if hasattr(config, key):
                setattr(config, key, value)

        self.config = config
        self._setup_logging()

        logger.debug(f"SchedulePorter initialized with config: {config}")

    def _setup_logging(self) -> None:
        """Setup logging configuration."""
        setup_logging(self.config.log_level, self.config.log_file)

    def export_schedules(self, reader: BaseReader, output_dir: str | Path) -> ExportResult:
        """Export every schedule the reader finds.

        Each schedule is written to its own JSON file. Schedules on the
        configured allow-lists are also grouped into the combined documents,
        and a plain-text trace of the run is written beside them.

        Args:
            reader: Reader bound to the Revit document
            output_dir: Directory to write into; created if missing

        Returns:
            ExportResult describing everything written

        Raises:
            ReaderError: If schedules cannot be enumerated
            ExportWriteError: If a combined file or the debug log cannot be written
        """
        start_time = time.time()
        started_at = datetime.now()
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        document_path = reader.document_path
        section_types = reader.section_types

        combined_full: dict[str, list[ScheduleRow]] = {}
        combined_dps: dict[str, list[ScheduleRow]] = {}
        schedule_results: list[ScheduleResult] = []
        debug_info: list[str] = []

        trace = DebugTrace()
        with trace, DocumentContext(document_path or FILES.UNSAVED_DOCUMENT):
            logger.info(f"=== Schedule Export Debug Log - {started_at} ===")
            logger.info(f"Document: {document_path or FILES.UNSAVED_DOCUMENT}")
            logger.info("")

            schedules = reader.get_schedules()

            for schedule in schedules:
                name = _schedule_name(schedule)
                with ScheduleContext(name):
                    result = self._export_schedule(
                        schedule,
                        name,
                        reader,
                        section_types,
                        output_dir,
                        combined_full,
                        combined_dps,
                        debug_info,
                    )
                schedule_results.append(result)

            timestamp = datetime.now().strftime(self.config.timestamp_format)
            combined_files: dict[str, Path] = {}
            combined_counts: dict[str, int] = {}

            for prefix, data in (
                (COMBINED.FULL_PREFIX, combined_full),
                (COMBINED.DPS_PREFIX, combined_dps),
            ):
                path = write_combined_json(
                    data, output_dir, prefix, timestamp, indent=self.config.json_indent
                )
                if path is not None:
                    combined_files[prefix] = path
                    combined_counts[prefix] = len(data)

            exported_count = sum(1 for r in schedule_results if r.exported)
            logger.info("")
            logger.info("=== SUMMARY ===")
            logger.info(f"Total schedules found: {len(schedules)}")
            logger.info(f"Successfully exported: {exported_count}")
            logger.info(f"Combined full schedules: {len(combined_full)}")
            logger.info(f"Combined DPS schedules: {len(combined_dps)}")

        debug_log_path = None
        if self.config.write_debug_log:
            debug_log_path = trace.write(output_dir / self.config.debug_log_name)

        return ExportResult(
            output_dir=output_dir,
            schedules=schedule_results,
            total_schedules=len(schedules),
            combined_files=combined_files,
            combined_counts=combined_counts,
            debug_log_path=debug_log_path,
            debug_info=debug_info,
            timestamp=timestamp,
            started_at=started_at,
            export_time=time.time() - start_time,
        )

    def _export_schedule(
        self,
        schedule: Any,
        name: str,
        reader: BaseReader,
        section_types: Any,
        output_dir: Path,
        combined_full: dict[str, list[ScheduleRow]],
        combined_dps: dict[str, list[ScheduleRow]],
        debug_info: list[str],
    ) -> ScheduleResult:
        """Extract, reshape and write a single schedule."""
        schedule_start = time.time()
        result = ScheduleResult(name=name)

        try:
            description = reader.describe(schedule)
            debug_info.append(description)
            logger.info(description)

            table = extract_schedule(schedule, section_types)
            result.row_count = table.row_count

            if table.is_empty:
                debug_info.append(f"  -> No data found for schedule: '{name}'")
                return result

            rows = apply_custom_formatting(name, table.rows)
            cleaned = clean_schedule_data(rows)

            if name in self.config.full_combined_schedules:
                combined_full[name] = cleaned
            if name in self.config.dps_combined_schedules:
                combined_dps[name] = cleaned

            result.output_file = write_schedule_json(
                rows, output_dir, name, indent=self.config.json_indent
            )
            result.exported = True
        except Exception as e:
            # One broken schedule must not stop the others
            error = f"Error processing schedule '{name}': {e}"
            logger.error(error)
            debug_info.append(f"  -> ERROR: {error}")
            result.errors.append(str(e))
        finally:
            result.processing_time = time.time() - schedule_start

        return result


def build_summary_message(result: ExportResult) -> str:
    """Build the message shown when an export run completes."""
    message = (
        f"Found {result.total_schedules} total schedules.\n"
        f"Successfully exported {result.exported_count} schedules to:\n{result.output_dir}"
    )

    if result.combined_files:
        message += "\n\nCombined JSONs created:"
        for prefix, path in result.combined_files.items():
            message += f"\n• {path.name} ({result.combined_counts.get(prefix, 0)} schedules)"

    if result.debug_log_path is not None:
        message += f"\n\nDebug log written to: {result.debug_log_path.name}"

    if result.exported_count == 0 and result.debug_info:
        entries = result.debug_info[: FILES.SUMMARY_DEBUG_ENTRIES]
        message += "\n\nFirst few debug entries:\n" + "\n".join(entries)

    return message


def _schedule_name(schedule: Any) -> str:
    try:
        return str(schedule.Name)
    except Exception:
        return "<unnamed schedule>"
