"""Tool for resolving the column keys of a schedule."""

from typing import Any, NamedTuple

from ...core.constants import FILES
from ...utils.logging_context import get_contextual_logger

logger = get_contextual_logger(__name__)


class SectionTypes(NamedTuple):
    """The two ``SectionType`` members of the Revit API used for reading cells."""

    header: Any
    body: Any


class HeaderStructure(NamedTuple):
    """Structure of resolved headers."""

    headers: list[str]
    sources: list[str]  # "header", "field" or "placeholder", per column

    @property
    def column_count(self) -> int:
        return len(self.headers)


def parse_headers(
    schedule: Any, table_data: Any, column_count: int, section_types: SectionTypes
) -> HeaderStructure:
    """
    Resolve one key per body column.

    Each column tries, in order: the text of the first row of the header
    section, the name of the schedule field at the same index, and finally
    a ``Column_N`` placeholder. Host calls that throw simply move the column
    on to the next strategy.

    Args:
        schedule: Revit ``ViewSchedule``
        table_data: ``TableData`` of that schedule
        column_count: Number of columns in the body section
        section_types: Header and body ``SectionType`` values

    Returns:
        Resolved header structure
    """
    header_section = _get_header_section(schedule, table_data, section_types)
    has_header_rows = header_section is not None and _row_count(header_section) > 0

    headers = []
    sources = []

    for col in range(column_count):
        header_text = ""
        source = "placeholder"

        if has_header_rows:
            header_text = _header_cell_text(schedule, col, section_types)
            if _has_text(header_text):
                source = "header"

        if not _has_text(header_text):
            header_text = _field_name(schedule, col)
            if _has_text(header_text):
                source = "field"

        if not _has_text(header_text):
            header_text = placeholder_header(col)
            source = "placeholder"

        headers.append(header_text)
        sources.append(source)

    return HeaderStructure(headers=headers, sources=sources)


def placeholder_header(col: int) -> str:
    """Synthetic key for a column without any header text."""
    return f"{FILES.PLACEHOLDER_COLUMN_PREFIX}{col}"


def _get_header_section(schedule: Any, table_data: Any, section_types: SectionTypes) -> Any:
    try:
        return table_data.GetSectionData(section_types.header)
    except Exception as e:
        logger.info(f"  -> Could not get header section for '{schedule.Name}': {e}")
        return None


def _row_count(section: Any) -> int:
    try:
        return int(section.NumberOfRows)
    except Exception:
        return 0


def _header_cell_text(schedule: Any, col: int, section_types: SectionTypes) -> str:
    try:
        return schedule.GetCellText(section_types.header, 0, col) or ""
    except Exception as e:
        logger.debug(f"Header cell {col} unreadable, trying field definition: {e}")
        return ""


def _field_name(schedule: Any, col: int) -> str:
    try:
        definition = schedule.Definition
        if col < definition.GetFieldCount():
            return definition.GetField(col).GetName() or ""
    except Exception as e:
        logger.debug(f"Field {col} unreadable, using placeholder: {e}")
    return ""


def _has_text(text: str | None) -> bool:
    return bool(text and text.strip())
