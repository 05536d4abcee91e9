"""Standard event names for structured logging."""

from __future__ import annotations


class LogEvents:
    """Event name constants for vcproj2filter logs.

    Use these constants instead of string literals to avoid typos.
    """

    # Application
    LOGGING_CONFIGURED = "logging_configured"

    # Project loading
    PROJECT_LOAD_STARTED = "project_load_started"
    PROJECT_LOADED = "project_loaded"
    PROJECT_LOAD_FAILED = "project_load_failed"
    PROJECT_ROOT_INVALID = "project_root_invalid"

    # Extraction
    ITEM_GROUP_SKIPPED_LABEL = "item_group_skipped_label"
    ITEM_SKIPPED_NO_INCLUDE = "item_skipped_no_include"
    FILE_ENTRY_EXTRACTED = "file_entry_extracted"
    EXTRACTION_COMPLETED = "extraction_completed"

    # Writing
    FILTERS_WRITE_STARTED = "filters_write_started"
    FILTERS_WRITTEN = "filters_written"
    FILTERS_WRITE_FAILED = "filters_write_failed"

    # Pipeline
    CONVERSION_STARTED = "conversion_started"
    CONVERSION_COMPLETED = "conversion_completed"
    CONVERSION_FAILED = "conversion_failed"


__all__ = ["LogEvents"]
