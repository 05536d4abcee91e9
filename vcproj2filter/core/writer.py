"""
Filters document construction and serialization.

The filters file holds two item groups: the distinct Filter definitions
followed by every extracted item pointing at its filter.
"""

import xml.etree.ElementTree as ET
from pathlib import Path

import structlog

from ..models.project import ConversionContext
from ..utils.errors import FilterWriteError
from ..utils.log_events import LogEvents

log = structlog.get_logger(__name__)

MSBUILD_NAMESPACE = "http://schemas.microsoft.com/developer/msbuild/2003"
TOOLS_VERSION = "4.0"
FILTER_TAG = "Filter"


def build_filters_document(context: ConversionContext, indent: str = "  ") -> ET.ElementTree:
    """
    Build the filters document for a conversion context.

    Args:
        context: Populated conversion context
        indent: Indentation for nested elements (empty string for compact output)

    Returns:
        ElementTree rooted at the Project element
    """
    project = ET.Element("Project", {"ToolsVersion": TOOLS_VERSION, "xmlns": MSBUILD_NAMESPACE})

    filter_group = ET.SubElement(project, "ItemGroup")
    for name in context.filters:
        ET.SubElement(filter_group, FILTER_TAG, {"Include": name})

    item_group = ET.SubElement(project, "ItemGroup")
    for kind, entries in context.iter_groups():
        for entry in entries:
            item = ET.SubElement(item_group, kind.tag, {"Include": entry.filename})
            if entry.filtername:
                ET.SubElement(item, FILTER_TAG).text = entry.filtername

    tree = ET.ElementTree(project)
    if indent:
        ET.indent(tree, space=indent)
    return tree


def write_filters_file(
    context: ConversionContext, path: str | Path, indent: str = "  "
) -> Path:
    """
    Serialize the filters document to ``path`` with an XML declaration.

    Args:
        context: Populated conversion context
        path: Destination file
        indent: Indentation for nested elements

    Returns:
        The path that was written

    Raises:
        FilterWriteError: If the destination cannot be written; no file is left behind
    """
    path = Path(path)
    tree = build_filters_document(context, indent=indent)
    data = ET.tostring(tree.getroot(), encoding="utf-8", xml_declaration=True) + b"\n"
    log.debug(LogEvents.FILTERS_WRITE_STARTED, path=str(path))

    opened = False
    try:
        with open(path, "wb") as fh:
            opened = True
            fh.write(data)
    except OSError as e:
        # Drop a partially written file
        if opened:
            path.unlink(missing_ok=True)
        log.warning(LogEvents.FILTERS_WRITE_FAILED, path=str(path), error=str(e))
        raise FilterWriteError(f"Could not write '{path}'", path=path, reason=str(e)) from e

    log.info(
        LogEvents.FILTERS_WRITTEN,
        path=str(path),
        filters=len(context.filters),
        entries=context.total_entries,
    )
    return path
