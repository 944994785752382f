#!/usr/bin/env python3
"""
Basic Usage Example - App Lifecycle Tracker

Drives a tracker with a scripted stream of host lifecycle notifications,
including the duplicate and intermediate values mobile platforms emit while
moving between foreground and background. Shows how to:
- Load configuration and set up logging
- Enable and disable a tracker
- React to published state changes

Run: python examples/basic_usage.py
"""

from pathlib import Path

from app_lifecycle import LifecycleStateTracker, ManualLifecycleSource, PublishedState
from app_lifecycle.config import ConfigLoader
from app_lifecycle.logging import configure_logging

RAW_EVENTS = ["inactive", "background", "background", "inactive", "active", "active"]


def on_change(published: PublishedState) -> None:
    print(f"  -> published {published.as_dict()}")


def main() -> None:
    config = ConfigLoader.create(Path(__file__).parent / "config").load()
    configure_logging(
        level=config.logging.level,
        format_json=config.logging.format_json,
        include_timestamp=config.logging.include_timestamp,
        include_caller=config.logging.include_caller,
    )

    source = ManualLifecycleSource()

    with LifecycleStateTracker(source, config=config, on_change=on_change, name="demo") as tracker:
        print(f"disabled: {tracker.track(False).as_dict()}")
        print(f"enabled:  {tracker.track(True).as_dict()}")

        for value in RAW_EVENTS:
            print(f"host emits {value!r}")
            source.emit(value)

        tracker.track(False)
        source.emit("background")
        print(f"while disabled: {tracker.track(False).as_dict()}")

    print(f"subscribe calls: {source.subscribe_calls}, release calls: {source.release_calls}")


if __name__ == "__main__":
    main()
