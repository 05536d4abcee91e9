"""
Custom exceptions for vcproj2filter.

This module defines a hierarchy of exceptions for better error handling
and user-facing error messages.
"""

from pathlib import Path
from typing import Any


class Vcproj2FilterError(Exception):
    """Base exception for all vcproj2filter errors."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """
        Initialize a vcproj2filter error.

        Args:
            message: Human-readable error message
            details: Additional error context for logging/debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return the error message."""
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ProjectLoadError(Vcproj2FilterError):
    """
    Exception raised when the input project cannot be opened or parsed.

    Covers missing files, permission problems and malformed XML.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str | Path | None = None,
        reason: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize a project load error.

        Args:
            message: Human-readable error message
            path: Project file that failed to load
            reason: Underlying error description
            details: Additional error context
        """
        load_details = {"path": str(path) if path is not None else None, "reason": reason}
        if details:
            load_details.update(details)
        super().__init__(message, details=load_details)
        self.path = path
        self.reason = reason


class ProjectFormatError(Vcproj2FilterError):
    """Exception raised when a parsed document is not an MSBuild project."""

    def __init__(
        self,
        message: str,
        *,
        path: str | Path | None = None,
        element: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize a project format error.

        Args:
            message: Human-readable error message
            path: Project file being read
            element: Tag of the unexpected root element
            details: Additional error context
        """
        format_details = {"path": str(path) if path is not None else None, "element": element}
        if details:
            format_details.update(details)
        super().__init__(message, details=format_details)
        self.path = path
        self.element = element


class FilterWriteError(Vcproj2FilterError):
    """Exception raised when the filters file cannot be written."""

    def __init__(
        self,
        message: str,
        *,
        path: str | Path | None = None,
        reason: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize a filter write error.

        Args:
            message: Human-readable error message
            path: Destination that could not be opened
            reason: Underlying error description
            details: Additional error context
        """
        write_details = {"path": str(path) if path is not None else None, "reason": reason}
        if details:
            write_details.update(details)
        super().__init__(message, details=write_details)
        self.path = path
        self.reason = reason


class ValidationError(Vcproj2FilterError):
    """
    Exception raised when input validation fails.

    This includes invalid configuration values.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize a validation error.

        Args:
            message: Human-readable error message
            field: Field that failed validation
            value: The invalid value
            details: Additional error context
        """
        validation_details = {"field": field, "value": repr(value)}
        if details:
            validation_details.update(details)
        super().__init__(message, details=validation_details)
        self.field = field
        self.value = value
