# ABOUTME: Routing models package exports
# ABOUTME: Exports read preference modes and the read preference model

from .read_preference import ReadPreference, ReadPreferenceMode

__all__ = [
    "ReadPreference",
    "ReadPreferenceMode",
]
