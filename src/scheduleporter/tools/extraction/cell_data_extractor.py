"""Tool for reading body rows of a schedule."""

from typing import Any

from ...models.schedule import ScheduleRow
from ...utils.logging_context import get_contextual_logger
from .header_parser import SectionTypes
from .value_parser import parse_numeric_value

logger = get_contextual_logger(__name__)


def extract_cell_data(
    schedule: Any,
    row_count: int,
    headers: list[str],
    section_types: SectionTypes,
    rows: list[ScheduleRow] | None = None,
) -> list[ScheduleRow]:
    """
    Read every body row into a mapping of header to value.

    Cells that cannot be read count as blank. Rows where every cell is blank
    are dropped. Non-blank text is run through ``parse_numeric_value``.

    Rows are appended to ``rows`` as they are read, so a caller that passes
    its own list keeps every row read before an exception.

    Args:
        schedule: Revit ``ViewSchedule``
        row_count: Number of rows in the body section
        headers: Column keys, one per body column
        section_types: Header and body ``SectionType`` values
        rows: List to append to; a new list when omitted

    Returns:
        Rows with at least one non-blank cell, in source order
    """
    if rows is None:
        rows = []

    for row in range(row_count):
        row_data: ScheduleRow = {}
        has_data = False
        cell_values = []

        for col, header in enumerate(headers):
            cell_text = read_cell_text(schedule, section_types.body, row, col)
            cell_values.append(f"'{cell_text}'")

            if cell_text.strip():
                has_data = True

            # Duplicate headers keep the right-most column's value
            row_data[header] = parse_numeric_value(cell_text) if cell_text else cell_text

        logger.info(f"    Row {row}: [{', '.join(cell_values)}] - HasData: {has_data}")

        if has_data:
            rows.append(row_data)

    return rows


def read_cell_text(schedule: Any, section_type: Any, row: int, col: int) -> str:
    """Read one cell's displayed text, treating failures as blank."""
    try:
        return schedule.GetCellText(section_type, row, col) or ""
    except Exception as e:
        logger.debug(f"Error getting cell text for row {row}, col {col}: {e}")
        return ""
