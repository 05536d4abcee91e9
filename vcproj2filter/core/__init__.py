"""Core conversion modules."""

from .converter import convert_project, default_output_path
from .extractor import extract_item_group, extract_project, load_project
from .paths import derive_filter_name, normalize_include_path
from .writer import build_filters_document, write_filters_file

__all__ = [
    "build_filters_document",
    "convert_project",
    "default_output_path",
    "derive_filter_name",
    "extract_item_group",
    "extract_project",
    "load_project",
    "normalize_include_path",
    "write_filters_file",
]
