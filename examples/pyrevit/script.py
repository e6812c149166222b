"""pyRevit pushbutton script running the interactive schedule export.

Place this file in a ``<Name>.pushbutton`` folder of a pyRevit extension.
"""

from scheduleporter import run_export

__title__ = "Export\nSchedules"

result = run_export(__revit__.ActiveUIDocument.Document)  # noqa: F821
if not result.succeeded:
    print(result.message)
