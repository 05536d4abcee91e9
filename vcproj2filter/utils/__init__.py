"""Utility modules."""

from .errors import (
    FilterWriteError,
    ProjectFormatError,
    ProjectLoadError,
    ValidationError,
    Vcproj2FilterError,
)
from .log_events import LogEvents
from .logger import get_logger, setup_logging

__all__ = [
    "Vcproj2FilterError",
    "ProjectLoadError",
    "ProjectFormatError",
    "FilterWriteError",
    "ValidationError",
    "LogEvents",
    "get_logger",
    "setup_logging",
]
