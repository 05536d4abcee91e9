"""
vcproj2filter - generate Visual Studio .filters files from project files.

Files are grouped into filters named after the directory part of their
Include path.
"""

from .core.converter import convert_project
from .utils.logger import ensure_logging_configured

ensure_logging_configured()

__version__ = "1.0.0"
__all__ = ["convert_project"]
