"""
Lifecycle state machine and tracker module.

Classifies raw lifecycle values, filters them through the active/inactive
hysteresis and manages the single subscription a tracker holds on its
lifecycle source.
"""
