"""Reader for ViewSchedule elements of a Revit document."""

from types import ModuleType
from typing import Any

from ..core.exceptions import HostAPIError
from ..tools.extraction.header_parser import SectionTypes
from ..utils.logging_context import get_contextual_logger
from .base_reader import BaseReader, ReaderError

logger = get_contextual_logger(__name__)


def load_revit_api() -> ModuleType:
    """Import ``Autodesk.Revit.DB`` from the running Revit session.

    Raises:
        HostAPIError: If not running inside Revit
    """
    try:
        from Autodesk.Revit import DB  # type: ignore[import-not-found]
    except ImportError as e:
        raise HostAPIError(
            "Autodesk.Revit.DB is not available; SchedulePorter must run inside Revit"
        ) from e
    return DB


class RevitScheduleReader(BaseReader):
    """Reads schedules through the Revit DB API.

    Args:
        document: Revit ``Document``
        api: Module exposing ``FilteredElementCollector``, ``ViewSchedule`` and
            ``SectionType``. Loaded from the Revit session when omitted.
    """

    def __init__(self, document: Any, api: Any | None = None):
        super().__init__(document)
        self.api = api if api is not None else load_revit_api()

    @property
    def section_types(self) -> SectionTypes:
        return SectionTypes(header=self.api.SectionType.Header, body=self.api.SectionType.Body)

    @property
    def document_path(self) -> str:
        return getattr(self.document, "PathName", None) or ""

    def get_schedules(self) -> list[Any]:
        # Templates and revision schedules are kept; anything without a body
        # section simply extracts to zero rows.
        try:
            collector = self.api.FilteredElementCollector(self.document)
            schedules = list(collector.OfClass(self.api.ViewSchedule).ToElements())
        except Exception as e:
            raise ReaderError(f"Could not collect schedules: {e}") from e

        logger.debug(f"Collected {len(schedules)} schedules")
        return schedules

    def describe(self, schedule: Any) -> str:
        try:
            category = schedule.Definition.CategoryId
        except Exception:
            category = None
        return (
            f"Found schedule: '{schedule.Name}' - Type: {getattr(schedule, 'ViewType', None)}"
            f" - Category: {category}"
        )
