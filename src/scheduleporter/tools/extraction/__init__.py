"""Extraction tools for getting data from schedule views."""

from .cell_data_extractor import extract_cell_data, read_cell_text
from .header_parser import HeaderStructure, SectionTypes, parse_headers, placeholder_header
from .schedule_extractor import extract_schedule
from .value_parser import parse_numeric_value

__all__ = [
    "extract_cell_data",
    "read_cell_text",
    "parse_headers",
    "placeholder_header",
    "HeaderStructure",
    "SectionTypes",
    "extract_schedule",
    "parse_numeric_value",
]
