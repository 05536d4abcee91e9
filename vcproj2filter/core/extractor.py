"""
File entry extraction from MSBuild project documents.

Walks the ItemGroup elements of a project, turning every ClCompile,
ClInclude and None item into a FileEntry tagged with its filter.
"""

import xml.etree.ElementTree as ET
from collections.abc import Iterator
from pathlib import Path

import structlog

from ..models.project import ConversionContext, FileEntry, ItemKind
from ..utils.errors import ProjectFormatError, ProjectLoadError
from ..utils.log_events import LogEvents
from .paths import derive_filter_name

log = structlog.get_logger(__name__)

PROJECT_TAG = "Project"
ITEM_GROUP_TAG = "ItemGroup"
INCLUDE_ATTRIBUTE = "Include"
LABEL_ATTRIBUTE = "Label"


def local_name(tag: str) -> str:
    """Strip the ``{namespace}`` prefix ElementTree puts on qualified tags."""
    return tag.rsplit("}", 1)[-1]


def iter_children(element: ET.Element, tag: str) -> Iterator[ET.Element]:
    """Yield direct children of ``element`` named ``tag``, in document order."""
    for child in element:
        if isinstance(child.tag, str) and local_name(child.tag) == tag:
            yield child


def load_project(path: str | Path) -> ET.Element:
    """
    Parse a project file and return its Project element.

    Args:
        path: Project file to read

    Returns:
        The root Project element

    Raises:
        ProjectLoadError: If the file cannot be opened or is not well-formed XML
        ProjectFormatError: If the document root is not a Project element
    """
    path = Path(path)
    log.debug(LogEvents.PROJECT_LOAD_STARTED, path=str(path))

    try:
        tree = ET.parse(path)
    except (OSError, ET.ParseError) as e:
        log.warning(LogEvents.PROJECT_LOAD_FAILED, path=str(path), error=str(e))
        raise ProjectLoadError(f"Could not open '{path}'", path=path, reason=str(e)) from e

    root = tree.getroot()
    if local_name(root.tag) != PROJECT_TAG:
        log.warning(LogEvents.PROJECT_ROOT_INVALID, path=str(path), element=root.tag)
        raise ProjectFormatError(
            f"'{path}' is not an MSBuild project (root element is '{local_name(root.tag)}')",
            path=path,
            element=root.tag,
        )

    log.debug(LogEvents.PROJECT_LOADED, path=str(path))
    return root


def extract_items(context: ConversionContext, item_group: ET.Element, kind: ItemKind) -> int:
    """
    Record every item of one kind found directly under an item group.

    Items without an Include attribute are skipped.

    Returns:
        Number of entries added
    """
    added = 0
    for item in iter_children(item_group, kind.tag):
        include = item.get(INCLUDE_ATTRIBUTE)
        # An empty Include names no file either
        if not include:
            log.debug(LogEvents.ITEM_SKIPPED_NO_INCLUDE, tag=kind.tag)
            continue

        entry = FileEntry(filename=include, filtername=derive_filter_name(include))
        context.add_entry(kind, entry)
        log.debug(
            LogEvents.FILE_ENTRY_EXTRACTED,
            tag=kind.tag,
            filename=entry.filename,
            filtername=entry.filtername,
        )
        added += 1
    return added


def extract_item_group(context: ConversionContext, item_group: ET.Element) -> int:
    """
    Extract all file entries from a single ItemGroup.

    Groups carrying a Label attribute (such as ProjectConfigurations) hold
    build settings rather than file listings and are ignored.

    Returns:
        Number of entries added
    """
    label = item_group.get(LABEL_ATTRIBUTE)
    if label is not None:
        log.debug(LogEvents.ITEM_GROUP_SKIPPED_LABEL, label=label)
        return 0

    return sum(extract_items(context, item_group, kind) for kind in ItemKind)


def extract_project(
    root: ET.Element, context: ConversionContext | None = None
) -> ConversionContext:
    """
    Build the conversion context for a parsed Project element.

    Args:
        root: Project element returned by load_project
        context: Optional context to extend (a fresh one by default)

    Returns:
        The populated conversion context
    """
    if context is None:
        context = ConversionContext()

    for item_group in iter_children(root, ITEM_GROUP_TAG):
        extract_item_group(context, item_group)

    log.info(
        LogEvents.EXTRACTION_COMPLETED,
        filters=len(context.filters),
        entries=context.total_entries,
    )
    return context
