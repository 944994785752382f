"""Configuration for lifecycle trackers."""

from .defaults import DefaultConfig, LoggingParams, TrackerConfig, TrackerParams, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "ConfigLoader",
    "ConfigValidator",
    "DefaultConfig",
    "LoggingParams",
    "TrackerConfig",
    "TrackerParams",
    "ValidationError",
    "get_default_config",
]
