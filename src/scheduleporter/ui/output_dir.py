"""Resolution of the directory exports are written to."""

from pathlib import Path

from ..core.constants import FILES


def desktop_dir() -> Path:
    return Path.home() / "Desktop"


def documents_dir() -> Path:
    return Path.home() / "Documents"


def resolve_output_dir(
    custom_path: str | None,
    document_path: str | None,
    folder_name: str = FILES.OUTPUT_FOLDER_NAME,
) -> Path:
    """
    Pick the export directory.

    A custom path is used when it is non-blank and its parent directory
    exists; otherwise exports go beside the Revit document, or to the
    desktop for a document that was never saved. In every case the files
    land in a ``folder_name`` subfolder.

    Args:
        custom_path: Path chosen in the prompt, if any
        document_path: ``Document.PathName``; empty for unsaved documents
        folder_name: Name of the subfolder to create

    Returns:
        Directory to export into (not created yet)
    """
    if custom_path and custom_path.strip():
        candidate = Path(custom_path.strip())
        if candidate.parent.is_dir():
            return candidate / folder_name

    if document_path and document_path.strip():
        return Path(document_path).parent / folder_name

    return desktop_dir() / folder_name
