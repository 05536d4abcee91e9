"""
Main entry point for vcproj2filter.

Runs the Typer application defined in core.cli.
"""

from .core.cli import app


def cli_main() -> None:
    """CLI entry point."""
    app(prog_name="vcproj2filter")


if __name__ == "__main__":
    cli_main()
