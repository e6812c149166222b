"""Centralized constants for SchedulePorter.

The schedule names, quantities and family names below belong to one project's
Revit model. They are fixed values, not configuration knobs.
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class ScheduleNames:
    """Names of schedules that get special handling."""

    HEAD_RAILS_SEGMENTS: Final[str] = "Head_Rails_Segments"
    PRIVADA_DOOR: Final[str] = "Privada_Door"
    PRIVADA_FASCIA: Final[str] = "Privada_Fascia"
    PRIVADA_HEAD_RAIL: Final[str] = "Privada_Head_Rail"
    PRIVADA_PANEL: Final[str] = "Privada_Panel"
    PRIVADA_PEDESTAL: Final[str] = "Privada_Pedestal"


@dataclass(frozen=True)
class CombinedExportConstants:
    """Allow-lists and file prefixes for the combined JSON documents."""

    FULL_SCHEDULES: Final[tuple[str, ...]] = (
        "Head_Rails_Segments",
        "Privada_Door",
        "Privada_Fascia",
        "Privada_Head_Rail",
        "Privada_Panel",
        "Privada_Pedestal",
    )
    DPS_SCHEDULES: Final[tuple[str, ...]] = (
        "Privada_Door",
        "Privada_Panel",
        "Privada_Fascia",
    )

    FULL_PREFIX: Final[str] = "combined_json_full"
    DPS_PREFIX: Final[str] = "combined_json_DPS"

    # yyyy-MM-dd_HH-mm
    TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%d_%H-%M"


@dataclass(frozen=True)
class QuantityConstants:
    """Fixed quantities injected by the per-schedule rules."""

    PEDESTAL_QUANTITY: Final[int] = 7
    HEAD_RAIL_QUANTITY: Final[int] = 6
    HEAD_RAIL_FAMILY_NAME: Final[str] = "Privada-Head_rail"

    # Keys of the summary objects
    FAMILY_NAME_KEY: Final[str] = "family_name"
    PEDESTAL_HEIGHT_KEY: Final[str] = "pedestal_height"
    QUANTITY_KEY: Final[str] = "quantity"
    HEAD_RAIL_QUANTITY_KEY: Final[str] = "head_rail_quantity"
    COMPONENT_ID_KEY: Final[str] = "component_ID"


@dataclass(frozen=True)
class UnitConstants:
    """Markers stripped from cell text before numeric parsing."""

    # Order matters: "mm" and "cm" must go before "m", "in" before "ft".
    UNIT_MARKERS: Final[tuple[str, ...]] = (
        '""',
        '"',
        "'",
        "°",
        "mm",
        "cm",
        "m",
        "in",
        "ft",
    )

    INT32_MIN: Final[int] = -(2**31)
    INT32_MAX: Final[int] = 2**31 - 1


@dataclass(frozen=True)
class FileConstants:
    """Output file and folder names."""

    OUTPUT_FOLDER_NAME: Final[str] = "ScheduleExports"
    DEBUG_LOG_NAME: Final[str] = "debug_log.txt"
    JSON_SUFFIX: Final[str] = ".json"
    UNSAVED_DOCUMENT: Final[str] = "Unsaved Document"

    # Characters Windows refuses in file names, besides ASCII control characters
    INVALID_FILENAME_CHARS: Final[str] = '<>:"/\\|?*'
    REMOVED_FILENAME_CHARS: Final[str] = "()[]{}"

    PLACEHOLDER_COLUMN_PREFIX: Final[str] = "Column_"

    # How many trace entries the summary shows when nothing was exported
    SUMMARY_DEBUG_ENTRIES: Final[int] = 5


# Create singleton instances for easy access
SCHEDULE_NAMES = ScheduleNames()
COMBINED = CombinedExportConstants()
QUANTITIES = QuantityConstants()
UNITS = UnitConstants()
FILES = FileConstants()
