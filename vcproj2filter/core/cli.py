"""
Command-line interface for vcproj2filter.

Usage: vcproj2filter 'path/to/my.vcxproj'
"""

import typer
from rich.console import Console

from ..config.settings import get_settings
from ..utils.errors import ProjectFormatError, ProjectLoadError, Vcproj2FilterError
from ..utils.logger import setup_logging
from .converter import convert_project

USAGE = "Usage: vcproj2filter 'path/to/my.vcxproj'"

console = Console(soft_wrap=True, highlight=False)

app = typer.Typer(
    help="Generate a Visual Studio .filters file from a project file.",
    add_completion=False,
)


@app.command(context_settings={"ignore_unknown_options": True})
def main(
    paths: list[str] | None = typer.Argument(
        None,
        metavar="PROJECT",
        help="Path to the .vcxproj file",
        show_default=False,
    ),
) -> None:
    """Write PROJECT.filters, grouping files into filters by directory."""
    # Arity is checked here so a wrong count exits 1 rather than click's 2
    if not paths or len(paths) != 1:
        console.print(USAGE, markup=False)
        raise typer.Exit(code=1)

    project = paths[0]

    try:
        settings = get_settings()
        setup_logging(
            log_level=settings.log_level,
            log_format=settings.log_format,
            app_version=settings.app_version,
            app_env=settings.app_env,
            debug=settings.debug,
        )
        result = convert_project(project, settings=settings)
    except (ProjectLoadError, ProjectFormatError):
        console.print(f"Error: Could not open '{project}'", style="red", markup=False)
        raise typer.Exit(code=1)
    except Vcproj2FilterError as e:
        console.print(f"Error: {e.message}", style="red", markup=False)
        raise typer.Exit(code=1)

    console.print(
        f"Wrote {result.output_path} ({result.filter_count} filters, {result.total_entries} files)",
        style="green",
        markup=False,
    )
