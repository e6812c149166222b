"""Prompts asking the user where exports should go."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from ..core.exceptions import HostAPIError
from ..utils.logging_context import get_contextual_logger
from .output_dir import desktop_dir, documents_dir

logger = get_contextual_logger(__name__)


class OutputChoice(Enum):
    """Options offered by the output folder prompt."""

    BROWSE = "browse"
    MANUAL = "manual"
    DEFAULT = "default"


PROMPT_TITLE = "Select Output Folder"
PROMPT_INSTRUCTION = "Choose Output Folder for Schedule Export"
PROMPT_CONTENT = (
    "Enter the path to the folder where you want to save the exported JSON files.\n\n"
    "How to get folder path:\n"
    "1. Create a new folder on your Desktop (or anywhere)\n"
    "2. Open the folder in File Explorer\n"
    "3. Click in the address bar at the top (where it shows the path)\n"
    "4. Copy the full path (Ctrl+C)\n"
    "5. Paste it in the input below\n\n"
    "Example: C:\\Users\\YourName\\Desktop\\MyScheduleExports\n\n"
    "Leave empty to use default location (next to Revit project file)."
)


class OutputPathPrompt(ABC):
    """Asks for an output folder and reports the result of a run."""

    @abstractmethod
    def choose(self) -> OutputChoice:
        """Ask which way the output folder should be chosen."""

    @abstractmethod
    def browse_for_folder(self) -> str | None:
        """Let the user pick a folder."""

    @abstractmethod
    def enter_path(self) -> str | None:
        """Let the user give a path directly."""

    def choose_output_path(self) -> str | None:
        """
        Run the prompt.

        Returns:
            Chosen path, or None to use the default location
        """
        choice = self.choose()
        logger.debug(f"Output folder choice: {choice.value}")

        if choice is OutputChoice.BROWSE:
            return self.browse_for_folder()
        if choice is OutputChoice.MANUAL:
            return self.enter_path()
        return None

    def show_message(self, title: str, message: str) -> None:
        """Show a message to the user."""
        logger.info(f"{title}: {message}")


class StaticPathPrompt(OutputPathPrompt):
    """Non-interactive prompt that always answers with the same path.

    Used for batch runs and tests. A ``None`` path means "use the default".
    """

    def __init__(self, path: str | None = None):
        self.path = path
        self.messages: list[tuple[str, str]] = []

    def choose(self) -> OutputChoice:
        return OutputChoice.MANUAL if self.path else OutputChoice.DEFAULT

    def browse_for_folder(self) -> str | None:
        return self.path

    def enter_path(self) -> str | None:
        return self.path

    def show_message(self, title: str, message: str) -> None:
        self.messages.append((title, message))
        super().show_message(title, message)


class TaskDialogPrompt(OutputPathPrompt):
    """Prompt built from Revit ``TaskDialog`` command links.

    Args:
        ui_api: Module exposing ``TaskDialog``, ``TaskDialogCommandLinkId`` and
            ``TaskDialogResult``. Loaded from the Revit session when omitted.
        forms_api: ``System.Windows.Forms``. Loaded on first browse when omitted.
    """

    def __init__(self, ui_api: Any | None = None, forms_api: Any | None = None):
        self.ui = ui_api if ui_api is not None else load_revit_ui()
        self._forms = forms_api

    def choose(self) -> OutputChoice:
        ui = self.ui
        dialog = ui.TaskDialog(PROMPT_TITLE)
        dialog.MainInstruction = PROMPT_INSTRUCTION
        dialog.MainContent = PROMPT_CONTENT
        dialog.AddCommandLink(
            ui.TaskDialogCommandLinkId.CommandLink1,
            "Browse for Folder",
            "Open folder browser dialog",
        )
        dialog.AddCommandLink(
            ui.TaskDialogCommandLinkId.CommandLink2, "Enter Path Manually", "Type the folder path"
        )
        dialog.AddCommandLink(
            ui.TaskDialogCommandLinkId.CommandLink3,
            "Use Default Location",
            "Save next to Revit project file",
        )

        result = dialog.Show()
        if result == ui.TaskDialogResult.CommandLink1:
            return OutputChoice.BROWSE
        if result == ui.TaskDialogResult.CommandLink2:
            return OutputChoice.MANUAL
        return OutputChoice.DEFAULT

    def browse_for_folder(self) -> str | None:
        try:
            forms = self._forms if self._forms is not None else load_windows_forms()
            folder_dialog = forms.FolderBrowserDialog()
            try:
                folder_dialog.Description = "Select folder for schedule exports"
                folder_dialog.ShowNewFolderButton = True
                if folder_dialog.ShowDialog() == forms.DialogResult.OK:
                    return folder_dialog.SelectedPath
            finally:
                folder_dialog.Dispose()
        except Exception as e:
            logger.warning(f"Could not open folder browser: {e}")
            self.show_message("Error", f"Could not open folder browser: {e}")
        return None

    def enter_path(self) -> str | None:
        ui = self.ui
        dialog = ui.TaskDialog("Enter Folder Path")
        dialog.MainInstruction = "Enter the full path to your output folder"
        dialog.MainContent = (
            "Paste the folder path here:\n\n"
            "Example: C:\\Users\\YourName\\Desktop\\MyScheduleExports\n\n"
            "Tip: Right-click and paste (Ctrl+V) if you copied from File Explorer"
        )
        dialog.AddCommandLink(
            ui.TaskDialogCommandLinkId.CommandLink1, "Use Desktop", "Save to Desktop/ScheduleExports"
        )
        dialog.AddCommandLink(
            ui.TaskDialogCommandLinkId.CommandLink2,
            "Use Documents",
            "Save to Documents/ScheduleExports",
        )
        dialog.AddCommandLink(
            ui.TaskDialogCommandLinkId.CommandLink3, "Cancel", "Use default location"
        )

        result = dialog.Show()
        if result == ui.TaskDialogResult.CommandLink1:
            return str(desktop_dir())
        if result == ui.TaskDialogResult.CommandLink2:
            return str(documents_dir())
        return None

    def show_message(self, title: str, message: str) -> None:
        logger.info(f"{title}: {message}")
        self.ui.TaskDialog.Show(title, message)


def load_revit_ui() -> Any:
    """Import ``Autodesk.Revit.UI`` from the running Revit session."""
    try:
        from Autodesk.Revit import UI  # type: ignore[import-not-found]
    except ImportError as e:
        raise HostAPIError("Autodesk.Revit.UI is not available outside Revit") from e
    return UI


def load_windows_forms() -> Any:
    """Load ``System.Windows.Forms`` through the CLR bridge."""
    try:
        import clr  # type: ignore[import-not-found]

        clr.AddReference("System.Windows.Forms")
        from System.Windows import Forms  # type: ignore[import-not-found]
    except ImportError as e:
        raise HostAPIError("System.Windows.Forms is not available") from e
    return Forms
