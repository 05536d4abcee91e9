"""
Project data models for vcproj2filter.

Defines the item kinds recognised in an MSBuild project, the file entries
extracted from it and the per-document conversion context.
"""

from collections.abc import Iterator
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class ItemKind(str, Enum):
    """Item element tags that are copied into the filters file.

    Declaration order is the order groups are extracted and written.
    """

    CL_COMPILE = "ClCompile"
    CL_INCLUDE = "ClInclude"
    NONE = "None"

    @property
    def tag(self) -> str:
        """XML tag written for entries of this kind."""
        return self.value


class FileEntry(BaseModel):
    """A single source reference and the filter it belongs to."""

    model_config = ConfigDict(frozen=True)

    filename: str = Field(..., min_length=1, description="Include path, verbatim")
    filtername: str = Field(default="", description="Filter name, empty when the file is top-level")


class FilterSet:
    """
    Distinct filter names, iterated in lexicographic order.

    Adding a name that is already present is a no-op.
    """

    def __init__(self, names: list[str] | None = None) -> None:
        self._names: set[str] = set()
        for name in names or []:
            self.add(name)

    def add(self, name: str) -> None:
        """Register a filter name."""
        self._names.add(name)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._names))

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"FilterSet({list(self)!r})"


FileGroups = dict[ItemKind, list[FileEntry]]


class ConversionContext:
    """
    State collected while converting one project document.

    The extractor fills it in a single pass and the writer drains it;
    entries are only ever appended.
    """

    def __init__(self) -> None:
        self.groups: FileGroups = {}
        self.filters = FilterSet()

    def add_entry(self, kind: ItemKind, entry: FileEntry) -> None:
        """
        Append an entry to its group, registering its filter.

        Args:
            kind: Item kind the entry was found under
            entry: Extracted file entry
        """
        if entry.filtername:
            self.filters.add(entry.filtername)
        self.groups.setdefault(kind, []).append(entry)

    def iter_groups(self) -> Iterator[tuple[ItemKind, list[FileEntry]]]:
        """Yield (kind, entries) for populated groups in ItemKind order."""
        for kind in ItemKind:
            if kind in self.groups:
                yield kind, self.groups[kind]

    def entry_counts(self) -> dict[str, int]:
        """Number of entries per item tag."""
        return {kind.tag: len(entries) for kind, entries in self.iter_groups()}

    @property
    def total_entries(self) -> int:
        return sum(len(entries) for entries in self.groups.values())


class ConversionResult(BaseModel):
    """Summary of a completed conversion."""

    model_config = ConfigDict(frozen=True)

    project_path: Path = Field(..., description="Input project file")
    output_path: Path = Field(..., description="Filters file that was written")
    filter_count: int = Field(default=0, ge=0, description="Number of distinct filters")
    entry_counts: dict[str, int] = Field(
        default_factory=dict, description="Entries written per item tag"
    )

    @property
    def total_entries(self) -> int:
        return sum(self.entry_counts.values())
