"""Entry point invoked by the Revit external command."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from .config import Config
from .models import ExportResult
from .readers import BaseReader, RevitScheduleReader
from .scheduleporter import SchedulePorter, build_summary_message
from .ui import OutputPathPrompt, TaskDialogPrompt, resolve_output_dir
from .utils.logging_context import get_contextual_logger

logger = get_contextual_logger(__name__)

SUMMARY_TITLE = "Schedule Export Complete"


class CommandStatus(Enum):
    """Mirrors ``Autodesk.Revit.UI.Result``."""

    SUCCEEDED = "Succeeded"
    FAILED = "Failed"


class CommandResult(BaseModel):
    """What the external command reports back to Revit."""

    status: CommandStatus = Field(..., description="Command outcome")
    message: str = Field("", description="Failure message shown by Revit")
    export: ExportResult | None = Field(None, description="Export details on success")

    @property
    def succeeded(self) -> bool:
        return self.status is CommandStatus.SUCCEEDED


def execute(
    command_data: Any,
    config: Config | None = None,
    prompt: OutputPathPrompt | None = None,
    reader: BaseReader | None = None,
) -> CommandResult:
    """Run the schedule export for the active document of an external command.

    Args:
        command_data: Revit ``ExternalCommandData``
        config: Configuration; loaded from the environment when omitted
        prompt: Output folder prompt; Revit task dialogs when omitted
        reader: Schedule reader; a ``RevitScheduleReader`` when omitted

    Returns:
        CommandResult; never raises
    """
    try:
        document = command_data.Application.ActiveUIDocument.Document
    except Exception as e:
        logger.error(f"No active document: {e}")
        return CommandResult(status=CommandStatus.FAILED, message=f"Error: {e}")

    return run_export(document, config=config, prompt=prompt, reader=reader)


def run_export(
    document: Any,
    config: Config | None = None,
    prompt: OutputPathPrompt | None = None,
    reader: BaseReader | None = None,
) -> CommandResult:
    """Prompt for a folder, export every schedule and show the summary.

    Args:
        document: Revit ``Document``
        config: Configuration; loaded from the environment when omitted
        prompt: Output folder prompt; Revit task dialogs when omitted
        reader: Schedule reader; a ``RevitScheduleReader`` when omitted

    Returns:
        CommandResult; never raises
    """
    try:
        porter = SchedulePorter(config)

        if prompt is None:
            prompt = TaskDialogPrompt()
        if reader is None:
            reader = RevitScheduleReader(document)

        custom_path = prompt.choose_output_path()
        output_dir = resolve_output_dir(
            custom_path, reader.document_path, porter.config.output_folder_name
        )
        logger.info(f"Exporting schedules to {output_dir}")

        result = porter.export_schedules(reader, output_dir)

        if porter.config.show_summary_dialog:
            prompt.show_message(SUMMARY_TITLE, build_summary_message(result))

        return CommandResult(status=CommandStatus.SUCCEEDED, export=result)
    except Exception as e:
        logger.error(f"Schedule export failed: {e}")
        return CommandResult(status=CommandStatus.FAILED, message=f"Error: {e}")
