"""Pytest configuration and shared fixtures.

The fakes below mirror the parts of the Revit API that SchedulePorter touches:
``ViewSchedule``, ``TableData``, ``TableSectionData`` and ``ScheduleDefinition``.
"""

import logging
from pathlib import Path
from types import SimpleNamespace

import pytest

from scheduleporter.config import Config
from scheduleporter.readers import RevitScheduleReader
from scheduleporter.tools.extraction import SectionTypes


class FakeSectionType:
    """Stand-in for ``Autodesk.Revit.DB.SectionType``."""

    Header = "Header"
    Body = "Body"


class FakeSection:
    """Stand-in for ``TableSectionData``."""

    def __init__(self, cells: list[list[str]], column_count: int | None = None):
        self.cells = cells
        self.NumberOfRows = len(cells)
        self.NumberOfColumns = (
            column_count if column_count is not None else max((len(r) for r in cells), default=0)
        )


class FakeTableData:
    """Stand-in for ``TableData``."""

    def __init__(self, sections: dict[str, FakeSection | None], failing: set[str] | None = None):
        self.sections = sections
        self.failing = failing or set()

    def GetSectionData(self, section_type):
        if section_type in self.failing:
            raise RuntimeError(f"{section_type} section unavailable")
        return self.sections.get(section_type)


class FakeField:
    def __init__(self, name: str):
        self.name = name

    def GetName(self):
        return self.name


class FakeDefinition:
    """Stand-in for ``ScheduleDefinition``."""

    def __init__(self, field_names: list[str], category_id: int = -2000023):
        self.fields = [FakeField(n) for n in field_names]
        self.CategoryId = category_id

    def GetFieldCount(self):
        return len(self.fields)

    def GetField(self, index):
        return self.fields[index]


class FakeSchedule:
    """Stand-in for ``ViewSchedule``.

    Args:
        name: Schedule name
        body: Body cell text, row by row
        header: Header cell text, row by row; None for no header section
        field_names: Names returned by the schedule definition
        failing_cells: (section, row, col) triples whose text cannot be read
        table_data_error: Make ``GetTableData`` raise
    """

    def __init__(
        self,
        name: str,
        body: list[list[str]],
        header: list[list[str]] | None = None,
        field_names: list[str] | None = None,
        failing_cells: set[tuple[str, int, int]] | None = None,
        table_data_error: bool = False,
        column_count: int | None = None,
    ):
        self.Name = name
        self.ViewType = "Schedule"
        self.Definition = FakeDefinition(field_names or [])
        self.failing_cells = failing_cells or set()
        self.table_data_error = table_data_error
        self.sections = {
            FakeSectionType.Body: FakeSection(body, column_count),
            FakeSectionType.Header: FakeSection(header) if header is not None else None,
        }

    def GetTableData(self):
        if self.table_data_error:
            raise RuntimeError("table data unavailable")
        return FakeTableData(self.sections)

    def GetCellText(self, section_type, row, col):
        if (section_type, row, col) in self.failing_cells:
            raise RuntimeError(f"cannot read {section_type} {row},{col}")
        cells = self.sections[section_type].cells
        if row >= len(cells) or col >= len(cells[row]):
            return ""
        return cells[row][col]


class FakeCollector:
    """Stand-in for ``FilteredElementCollector``."""

    def __init__(self, document):
        self.document = document
        self.element_class = None

    def OfClass(self, element_class):
        self.element_class = element_class
        return self

    def ToElements(self):
        return list(self.document.schedules)


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo level and propagation changes made to the package logger."""
    package_logger = logging.getLogger("scheduleporter")
    level, propagate = package_logger.level, package_logger.propagate
    yield package_logger
    package_logger.setLevel(level)
    package_logger.propagate = propagate


class ListHandler(logging.Handler):
    """Keeps every record it receives."""

    def __init__(self):
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def root_handler():
    """A handler on the root logger, like a host's console or log file."""
    handler = ListHandler()
    root = logging.getLogger()
    root.addHandler(handler)
    yield handler
    root.removeHandler(handler)


@pytest.fixture
def section_types() -> SectionTypes:
    return SectionTypes(header=FakeSectionType.Header, body=FakeSectionType.Body)


@pytest.fixture
def revit_api() -> SimpleNamespace:
    """Fake ``Autodesk.Revit.DB`` module."""
    return SimpleNamespace(
        SectionType=FakeSectionType,
        ViewSchedule=FakeSchedule,
        FilteredElementCollector=FakeCollector,
    )


@pytest.fixture
def door_schedule() -> FakeSchedule:
    """A plain schedule whose first body row repeats the titles."""
    return FakeSchedule(
        "Privada_Door",
        header=[["Privada_Door"]],
        field_names=["Mark", "Width", "Height"],
        body=[
            ["Mark", "Width", "Height"],
            ["D1", "900mm", "2100mm"],
            ["", "", ""],
            ["D2", "850.5mm", "2100mm"],
        ],
    )


@pytest.fixture
def pedestal_schedule() -> FakeSchedule:
    return FakeSchedule(
        "Privada_Pedestal",
        field_names=["Family", "Height"],
        body=[["Family", "Height"], ["FamX", "300mm"]],
    )


@pytest.fixture
def head_rail_schedule() -> FakeSchedule:
    return FakeSchedule(
        "Privada_Head_Rail",
        field_names=["Type", "Length"],
        body=[["Type", "Length"], ["HR-1", "1200mm"], ["Grand total: 2", ""]],
    )


@pytest.fixture
def segments_schedule() -> FakeSchedule:
    return FakeSchedule(
        "Head_Rails_Segments",
        field_names=["A", "B"],
        body=[["Segment 1", "Segment 2"], ["1200mm", "950mm"]],
    )


@pytest.fixture
def make_document():
    """Build a fake Revit ``Document`` holding the given schedules."""

    def _make(schedules, path_name: str = ""):
        return SimpleNamespace(PathName=path_name, schedules=list(schedules))

    return _make


@pytest.fixture
def make_reader(revit_api, make_document):
    def _make(schedules, path_name: str = ""):
        return RevitScheduleReader(make_document(schedules, path_name), api=revit_api)

    return _make


@pytest.fixture
def config() -> Config:
    return Config(log_level="INFO")


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "ScheduleExports"
