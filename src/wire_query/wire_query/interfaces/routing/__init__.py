# ABOUTME: Routing interfaces package exports
# ABOUTME: Exports the abstract read preference contract

from .read_preference import AbstractReadPreference

__all__ = ["AbstractReadPreference"]
