"""Formatting tools applied to extracted schedule rows."""

from .custom_formatters import (
    CUSTOM_FORMATTERS,
    apply_custom_formatting,
    clean_schedule_data,
    format_head_rail,
    format_head_rail_segments,
    format_pedestal,
)

__all__ = [
    "CUSTOM_FORMATTERS",
    "apply_custom_formatting",
    "clean_schedule_data",
    "format_head_rail",
    "format_head_rail_segments",
    "format_pedestal",
]
