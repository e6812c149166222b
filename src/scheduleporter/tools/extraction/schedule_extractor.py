"""Tool for extracting a whole schedule into a ScheduleTable."""

from typing import Any

from ...models.schedule import ScheduleTable
from ...utils.logging_context import OperationContext, get_contextual_logger
from .cell_data_extractor import extract_cell_data
from .header_parser import SectionTypes, parse_headers

logger = get_contextual_logger(__name__)


def extract_schedule(schedule: Any, section_types: SectionTypes) -> ScheduleTable:
    """
    Extract the body of a schedule view.

    A schedule that cannot be read yields an empty table rather than an
    exception, so one broken view never stops an export run.

    Args:
        schedule: Revit ``ViewSchedule``
        section_types: Header and body ``SectionType`` values

    Returns:
        Extracted table (possibly empty)
    """
    name = str(schedule.Name)
    table = ScheduleTable(name=name)

    with OperationContext("extract"):
        try:
            try:
                table_data = schedule.GetTableData()
            except Exception as e:
                logger.info(f"  -> Cannot get table data for schedule '{name}': {e}")
                return table

            if table_data is None:
                logger.info(f"  -> No table data for schedule: {name}")
                return table

            body = table_data.GetSectionData(section_types.body)
            if body is None:
                logger.info(f"  -> No body section data for schedule: {name}")
                return table

            row_count = int(body.NumberOfRows)
            column_count = int(body.NumberOfColumns)
            logger.info(
                f"  -> Schedule '{name}' has {row_count} rows and {column_count} columns"
            )

            if row_count == 0:
                logger.info(f"  -> Schedule '{name}' has no data rows")
                return table

            header_structure = parse_headers(schedule, table_data, column_count, section_types)
            logger.info(f"  -> Headers for '{name}': {', '.join(header_structure.headers)}")

            placeholders = [
                header
                for header, source in zip(header_structure.headers, header_structure.sources)
                if source == "placeholder"
            ]
            if placeholders:
                logger.debug(f"No header text or field name for: {', '.join(placeholders)}")

            table.headers = header_structure.headers
            table.total_rows = row_count
            # Rows land in the table as they are read
            extract_cell_data(
                schedule, row_count, header_structure.headers, section_types, rows=table.rows
            )

            logger.info(f"  -> Extracted {table.row_count} data rows from '{name}'")
            logger.info("")
        except Exception as e:
            logger.error(f"  -> ERROR extracting data from schedule '{name}': {e}")

    return table
