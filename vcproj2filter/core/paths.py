"""Include path normalization and filter name derivation."""

from __future__ import annotations

PATH_SEPARATOR = "\\"


def normalize_include_path(path: str) -> str:
    """
    Strip relative prefixes such as ``.\\`` and ``..\\`` from an include path.

    Each round drops a run of leading dots and then at most one separator;
    rounds repeat while the remainder still starts with a dot, so
    ``..\\..\\src\\a.cpp`` becomes ``src\\a.cpp``. A path made only of dots
    and separators becomes an empty string.

    Args:
        path: Raw ``Include`` attribute value.

    Returns:
        The path without its relative prefix.
    """
    start = 0
    end = len(path)
    while True:
        while start < end and path[start] == ".":
            start += 1
        if start < end and path[start] == PATH_SEPARATOR:
            start += 1
        if start >= end or path[start] != ".":
            break
    return path[start:]


def derive_filter_name(path: str) -> str:
    """
    Return the filter for an include path.

    The filter is the normalized path up to its last separator, or an
    empty string for top-level files.
    """
    normalized = normalize_include_path(path)
    index = normalized.rfind(PATH_SEPARATOR)
    if index == -1:
        return ""
    return normalized[:index]
