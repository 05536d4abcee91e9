"""Configuration module for vcproj2filter."""

from .settings import OutputConfig, Settings, get_settings

__all__ = ["OutputConfig", "Settings", "get_settings"]
