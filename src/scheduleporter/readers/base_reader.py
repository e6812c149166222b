"""Base class for schedule readers."""

from abc import ABC, abstractmethod
from typing import Any

from ..core.exceptions import SchedulePorterError
from ..tools.extraction.header_parser import SectionTypes


class ReaderError(SchedulePorterError):
    """Raised when schedules cannot be enumerated from a document."""

    pass


class BaseReader(ABC):
    """Enumerates the schedule views of a host document."""

    def __init__(self, document: Any):
        self.document = document

    @property
    @abstractmethod
    def section_types(self) -> SectionTypes:
        """Header and body section identifiers of the host API."""

    @property
    @abstractmethod
    def document_path(self) -> str:
        """Path of the document on disk, or an empty string if unsaved."""

    @abstractmethod
    def get_schedules(self) -> list[Any]:
        """Return every schedule view in the document."""

    def describe(self, schedule: Any) -> str:
        """One-line description of a schedule for the debug trace."""
        return f"Found schedule: '{schedule.Name}'"
