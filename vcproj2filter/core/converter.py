"""
Project-to-filters conversion pipeline.

Loads a project, extracts its file entries and writes the companion
filters file next to it.
"""

from pathlib import Path

import structlog

from ..config.settings import Settings, get_settings
from ..models.project import ConversionResult
from ..utils.errors import Vcproj2FilterError
from ..utils.log_events import LogEvents
from ..utils.logger import ConversionLogContext
from .extractor import extract_project, load_project
from .writer import write_filters_file

log = structlog.get_logger(__name__)


def default_output_path(project_path: str | Path, suffix: str = ".filters") -> Path:
    """Return ``<project_path><suffix>``, e.g. ``app.vcxproj.filters``."""
    project_path = Path(project_path)
    return project_path.with_name(project_path.name + suffix)


def convert_project(
    project_path: str | Path,
    output_path: str | Path | None = None,
    settings: Settings | None = None,
) -> ConversionResult:
    """
    Generate the filters file for a project.

    Args:
        project_path: MSBuild project to read
        output_path: Destination (defaults to the project path plus the configured suffix)
        settings: Settings to use (defaults to get_settings())

    Returns:
        Summary of the conversion

    Raises:
        ProjectLoadError: If the project cannot be opened or parsed
        ProjectFormatError: If the document is not a Project
        FilterWriteError: If the filters file cannot be written
    """
    settings = settings or get_settings()
    project_path = Path(project_path)
    if output_path is None:
        output_path = default_output_path(project_path, settings.output.suffix)
    output_path = Path(output_path)

    with ConversionLogContext(project=str(project_path)):
        log.info(LogEvents.CONVERSION_STARTED, output=str(output_path))
        try:
            root = load_project(project_path)
            context = extract_project(root)
            write_filters_file(context, output_path, indent=settings.output.indent)
        except Vcproj2FilterError as e:
            log.info(LogEvents.CONVERSION_FAILED, **e.to_dict())
            raise

        result = ConversionResult(
            project_path=project_path,
            output_path=output_path,
            filter_count=len(context.filters),
            entry_counts=context.entry_counts(),
        )
        log.info(
            LogEvents.CONVERSION_COMPLETED,
            output=str(output_path),
            filters=result.filter_count,
            entries=result.total_entries,
        )
        return result
