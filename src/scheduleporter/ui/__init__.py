"""User-facing prompts and output folder resolution."""

from .output_dir import desktop_dir, documents_dir, resolve_output_dir
from .output_prompt import (
    OutputChoice,
    OutputPathPrompt,
    StaticPathPrompt,
    TaskDialogPrompt,
    load_revit_ui,
    load_windows_forms,
)

__all__ = [
    "OutputChoice",
    "OutputPathPrompt",
    "StaticPathPrompt",
    "TaskDialogPrompt",
    "desktop_dir",
    "documents_dir",
    "load_revit_ui",
    "load_windows_forms",
    "resolve_output_dir",
]
