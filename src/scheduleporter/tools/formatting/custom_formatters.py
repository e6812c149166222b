"""Per-schedule reshaping rules.

These rules are tied to the schedule names of one project model. They are
looked up by exact name; every other schedule passes through untouched.
"""

from collections.abc import Callable

from ...core.constants import QUANTITIES, SCHEDULE_NAMES
from ...models.schedule import ScheduleRow
from ...utils.logging_context import OperationContext, get_contextual_logger

logger = get_contextual_logger(__name__)

Formatter = Callable[[list[ScheduleRow]], list[ScheduleRow]]


def format_head_rail_segments(rows: list[ScheduleRow]) -> list[ScheduleRow]:
    """Collapse a header row and a data row into one object.

    The first row's values become the keys and the second row's values,
    matched by column, become the values.
    """
    if len(rows) < 2:
        return rows

    header_row, data_row = rows[0], rows[1]
    result: ScheduleRow = {}

    for column, label in header_row.items():
        if column in data_row:
            result[str(label)] = data_row[column]

    return [result]


def format_pedestal(rows: list[ScheduleRow]) -> list[ScheduleRow]:
    """Build the single pedestal summary object from the second row."""
    if len(rows) < 2:
        return rows

    data_row = rows[1]
    result: ScheduleRow = {}

    values = list(data_row.values())
    if len(values) >= 2:
        result[QUANTITIES.FAMILY_NAME_KEY] = values[0]
        result[QUANTITIES.PEDESTAL_HEIGHT_KEY] = values[1]
        result[QUANTITIES.QUANTITY_KEY] = QUANTITIES.PEDESTAL_QUANTITY

    return [result]


def format_head_rail(rows: list[ScheduleRow]) -> list[ScheduleRow]:
    """Replace the last row with the head rail quantity summary."""
    if not rows:
        return rows

    result = list(rows)
    result[-1] = {
        QUANTITIES.HEAD_RAIL_QUANTITY_KEY: QUANTITIES.HEAD_RAIL_QUANTITY,
        QUANTITIES.FAMILY_NAME_KEY: QUANTITIES.HEAD_RAIL_FAMILY_NAME,
    }
    return result


CUSTOM_FORMATTERS: dict[str, Formatter] = {
    SCHEDULE_NAMES.HEAD_RAILS_SEGMENTS: format_head_rail_segments,
    SCHEDULE_NAMES.PRIVADA_PEDESTAL: format_pedestal,
    SCHEDULE_NAMES.PRIVADA_HEAD_RAIL: format_head_rail,
}


def apply_custom_formatting(schedule_name: str, rows: list[ScheduleRow]) -> list[ScheduleRow]:
    """
    Apply the reshaping rule registered for a schedule name.

    Args:
        schedule_name: Exact schedule name
        rows: Extracted rows

    Returns:
        Reshaped rows, or the original rows when no rule applies or the rule fails
    """
    formatter = CUSTOM_FORMATTERS.get(schedule_name)
    if formatter is None:
        return rows

    with OperationContext("format"):
        try:
            return formatter(rows)
        except Exception as e:
            logger.warning(f"Error applying custom formatting to {schedule_name}: {e}")
            return rows


def clean_schedule_data(rows: list[ScheduleRow]) -> list[ScheduleRow]:
    """
    Drop the first row and rename each remaining row's first column.

    The first body row of these schedules repeats the column titles, and the
    first column always holds the component identifier.

    Args:
        rows: Formatted rows

    Returns:
        Cleaned rows; inputs of one row or fewer come back unchanged
    """
    if not rows or len(rows) <= 1:
        return rows

    with OperationContext("clean"):
        try:
            cleaned = []
            for row in rows[1:]:
                cleaned_row: ScheduleRow = {}
                for index, (key, value) in enumerate(row.items()):
                    if index == 0:
                        cleaned_row[QUANTITIES.COMPONENT_ID_KEY] = value
                    else:
                        cleaned_row[key] = value
                cleaned.append(cleaned_row)
            return cleaned
        except Exception as e:
            logger.warning(f"Error cleaning schedule data: {e}")
            return rows
