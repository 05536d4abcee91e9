"""Data models for vcproj2filter."""

from .project import (
    ConversionContext,
    ConversionResult,
    FileEntry,
    FileGroups,
    FilterSet,
    ItemKind,
)

__all__ = [
    "ConversionContext",
    "ConversionResult",
    "FileEntry",
    "FileGroups",
    "FilterSet",
    "ItemKind",
]
