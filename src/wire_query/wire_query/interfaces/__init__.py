# ABOUTME: Core interfaces package exports
# ABOUTME: Exports the abstract contracts collaborating components implement

# Routing interfaces
from .routing import AbstractReadPreference

__all__ = [
    "AbstractReadPreference",
]
