"""Data models for extracted schedules and export results."""

from datetime import datetime
from pathlib import Path
from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, Field

CellValue: TypeAlias = str | int | float
ScheduleRow: TypeAlias = dict[str, CellValue]


class ScheduleTable(BaseModel):
    """Rows read from the body of one schedule view."""

    model_config = ConfigDict(strict=True)

    name: str = Field(..., description="Schedule name as shown in Revit")
    headers: list[str] = Field(default_factory=list, description="Column keys, in order")
    rows: list[ScheduleRow] = Field(
        default_factory=list, description="Body rows with at least one non-blank cell"
    )
    total_rows: int = Field(0, ge=0, description="Body rows in the source, blanks included")

    @property
    def row_count(self) -> int:
        """Number of rows kept."""
        return len(self.rows)

    @property
    def is_empty(self) -> bool:
        """Check if no data rows were found."""
        return not self.rows


class ScheduleResult(BaseModel):
    """Outcome of exporting a single schedule."""

    model_config = ConfigDict(strict=True)

    name: str = Field(..., description="Schedule name")
    row_count: int = Field(0, ge=0, description="Rows extracted")
    exported: bool = Field(False, description="A JSON file was written")
    output_file: Path | None = Field(None, description="Per-schedule JSON file")
    errors: list[str] = Field(default_factory=list, description="Errors hit on this schedule")
    processing_time: float = Field(0.0, ge=0.0, description="Seconds spent on this schedule")


class ExportResult(BaseModel):
    """Result of one export run."""

    model_config = ConfigDict(strict=True)

    output_dir: Path = Field(..., description="Directory the files were written to")
    schedules: list[ScheduleResult] = Field(default_factory=list, description="Per-schedule results")
    total_schedules: int = Field(0, ge=0, description="Schedules found in the document")
    combined_files: dict[str, Path] = Field(
        default_factory=dict, description="Combined JSON files written, by prefix"
    )
    combined_counts: dict[str, int] = Field(
        default_factory=dict, description="Schedules in each combined JSON, by prefix"
    )
    debug_log_path: Path | None = Field(None, description="Debug trace file")
    debug_info: list[str] = Field(
        default_factory=list, description="Short per-schedule notes for the summary"
    )
    timestamp: str = Field(..., description="Timestamp used in combined file names")
    started_at: datetime = Field(default_factory=datetime.now, description="Run start time")
    export_time: float = Field(0.0, ge=0.0, description="Total seconds for the run")

    @property
    def exported_count(self) -> int:
        """Number of schedules written to their own JSON file."""
        return sum(1 for schedule in self.schedules if schedule.exported)

    @property
    def failed_schedules(self) -> list[str]:
        """Names of schedules that hit an error."""
        return [schedule.name for schedule in self.schedules if schedule.errors]
