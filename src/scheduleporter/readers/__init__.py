"""Readers for schedules held by a host document."""

from .base_reader import BaseReader, ReaderError
from .revit_reader import RevitScheduleReader, load_revit_api

__all__ = [
    "BaseReader",
    "ReaderError",
    "RevitScheduleReader",
    "load_revit_api",
]
