"""Configuration model for SchedulePorter."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from .core.constants import COMBINED, FILES
from .core.exceptions import ConfigurationError


class Config(BaseModel):
    """Configuration for SchedulePorter."""

    # Output layout
    output_folder_name: str = Field(
        FILES.OUTPUT_FOLDER_NAME, description="Folder created inside the chosen output path"
    )
    debug_log_name: str = Field(FILES.DEBUG_LOG_NAME, description="Name of the debug trace file")
    timestamp_format: str = Field(
        COMBINED.TIMESTAMP_FORMAT, description="strftime format for combined file names"
    )
    json_indent: int = Field(2, ge=0, le=8, description="Indentation of written JSON")

    # Combined documents
    full_combined_schedules: list[str] = Field(
        default_factory=lambda: list(COMBINED.FULL_SCHEDULES),
        description="Schedules grouped into the full combined JSON",
    )
    dps_combined_schedules: list[str] = Field(
        default_factory=lambda: list(COMBINED.DPS_SCHEDULES),
        description="Schedules grouped into the DPS combined JSON",
    )

    # Behaviour
    write_debug_log: bool = Field(True, description="Write the plain-text debug trace")
    show_summary_dialog: bool = Field(True, description="Show the completion dialog in Revit")

    # Logging
    log_level: str = Field("INFO", description="Logging level")
    log_file: Path | None = Field(None, description="Log file path")

    @field_validator("output_folder_name", "debug_log_name")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        if value.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {value}")
        return value.upper()

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment variables.

        This method will automatically load from a .env file if present, then read
        configuration from environment variables.
        """
        import os

        from dotenv import load_dotenv
        from pydantic import ValidationError

        # Load .env file if it exists (will not override existing env vars)
        load_dotenv()

        log_file = os.getenv("SCHEDULEPORTER_LOG_FILE")

        try:
            return cls(
                output_folder_name=os.getenv(
                    "SCHEDULEPORTER_OUTPUT_FOLDER_NAME", FILES.OUTPUT_FOLDER_NAME
                ),
                debug_log_name=os.getenv("SCHEDULEPORTER_DEBUG_LOG_NAME", FILES.DEBUG_LOG_NAME),
                timestamp_format=os.getenv(
                    "SCHEDULEPORTER_TIMESTAMP_FORMAT", COMBINED.TIMESTAMP_FORMAT
                ),
                json_indent=int(os.getenv("SCHEDULEPORTER_JSON_INDENT", "2")),
                write_debug_log=os.getenv("SCHEDULEPORTER_WRITE_DEBUG_LOG", "true").lower()
                == "true",
                show_summary_dialog=os.getenv(
                    "SCHEDULEPORTER_SHOW_SUMMARY_DIALOG", "true"
                ).lower()
                == "true",
                log_level=os.getenv("SCHEDULEPORTER_LOG_LEVEL", "INFO"),
                log_file=Path(log_file) if log_file else None,
            )
        except (ValidationError, ValueError) as e:
            raise ConfigurationError(f"Invalid SchedulePorter configuration: {e}") from e
