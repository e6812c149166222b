"""Tool for turning displayed cell text into numbers where possible."""

import math
import re

from ...core.constants import UNITS
from ...models.schedule import CellValue

# Plain decimals, optionally with thousands separators and an exponent
_NUMBER_PATTERN = re.compile(
    r"^[+-]?(?:\d{1,3}(?:,\d{3})+|\d+)?(?:\.\d*)?(?:[eE][+-]?\d+)?$"
)


def parse_numeric_value(cell_text: str) -> CellValue:
    """
    Parse displayed cell text as a number, falling back to the text itself.

    Unit markers and quote characters are stripped before parsing, so
    "12.5mm" becomes 12.5 and "300mm" becomes 300. Whole numbers that fit
    a 32-bit signed integer come back as int, everything else as float.
    Text that still isn't a number afterwards ("N/A", "Frame") is returned
    unchanged.

    Args:
        cell_text: Text exactly as Revit displays it

    Returns:
        int, float, or the original string
    """
    try:
        clean_text = _strip_units(cell_text)
        value = _parse_decimal(clean_text)
    except (TypeError, ValueError, OverflowError):
        return cell_text

    if value is None:
        return cell_text

    if value.is_integer() and UNITS.INT32_MIN <= value <= UNITS.INT32_MAX:
        return int(value)
    return value


def _strip_units(cell_text: str) -> str:
    """Remove surrounding quotes and unit markers."""
    clean_text = cell_text

    if len(clean_text) >= 2 and clean_text.startswith('"') and clean_text.endswith('"'):
        clean_text = clean_text[1:-1]

    for marker in UNITS.UNIT_MARKERS:
        clean_text = clean_text.replace(marker, "")

    return clean_text.strip()


def _parse_decimal(text: str) -> float | None:
    """Parse a finite decimal number, or return None."""
    if not text or not _NUMBER_PATTERN.match(text):
        return None

    # Needs at least one digit; the pattern alone accepts "+" or "."
    if not any(ch.isdigit() for ch in text):
        return None

    value = float(text.replace(",", ""))
    if not math.isfinite(value):
        return None
    return value
