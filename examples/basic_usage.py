"""Basic usage example for SchedulePorter.

Run from a Python shell hosted inside Revit (pyRevit, RevitPythonShell) where
``__revit__`` is the running UIApplication.
"""

from pathlib import Path

from scheduleporter import Config, SchedulePorter, build_summary_message
from scheduleporter.readers import RevitScheduleReader
from scheduleporter.ui import resolve_output_dir


def export_active_document(uiapp):
    """Export every schedule of the active document without any dialogs."""
    document = uiapp.ActiveUIDocument.Document

    porter = SchedulePorter()
    reader = RevitScheduleReader(document)

    output_dir = resolve_output_dir(None, reader.document_path)
    print(f"Exporting schedules to: {output_dir}")
    print("-" * 50)

    result = porter.export_schedules(reader, output_dir)

    print(build_summary_message(result))
    print(f"\nExport time: {result.export_time:.2f}s")

    for schedule in result.schedules:
        status = "exported" if schedule.exported else "skipped"
        print(f"  {schedule.name}: {schedule.row_count} rows ({status})")
        for error in schedule.errors:
            print(f"    error: {error}")


def export_dps_only(uiapp, target: Path):
    """Export to a fixed folder, combining only the door schedule."""
    config = Config(
        dps_combined_schedules=["Privada_Door"],
        write_debug_log=False,
        json_indent=4,
    )
    porter = SchedulePorter(config)
    reader = RevitScheduleReader(uiapp.ActiveUIDocument.Document)

    result = porter.export_schedules(reader, resolve_output_dir(str(target), reader.document_path))
    for prefix, path in result.combined_files.items():
        print(f"{prefix}: {path}")


if __name__ == "__main__":
    export_active_document(__revit__)  # noqa: F821
