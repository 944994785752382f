"""Default configuration parameters for lifecycle tracking."""

from dataclasses import dataclass, fields
from typing import Any, Optional


@dataclass(frozen=True)
class TrackerParams:
    """Lifecycle classification and subscription parameters."""
    event_name: str = "change"                       # Source notification to subscribe to
    initial_value: str = "inactive"                  # Raw value before any event arrives
    synthetic_value: str = "active"                  # Injected once on first enable
    active_value: str = "active"                     # Exact match for ActiveLike
    inactive_pattern: str = "inactive|background"    # Substring pattern for InactiveLike


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False
    include_timestamp: bool = True
    include_caller: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    tracker: TrackerParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        tracker=TrackerParams(),
        logging=LoggingParams(),
    )


@dataclass(frozen=True)
class TrackerConfig:
    """Resolved configuration consumed by a tracker."""
    tracker: TrackerParams = TrackerParams()
    logging: LoggingParams = LoggingParams()

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]] = None) -> "TrackerConfig":
        """Build from a merged config dict, ignoring unknown keys."""
        data = data or {}
        return cls(
            tracker=_build(TrackerParams, data.get("tracker")),
            logging=_build(LoggingParams, data.get("logging")),
        )


def _build(params_cls: type, section: Optional[dict[str, Any]]) -> Any:
    section = section or {}
    known = {f.name for f in fields(params_cls)}
    return params_cls(**{k: v for k, v in section.items() if k in known})
