# ABOUTME: Exceptions package exports
# ABOUTME: Exports the structured exception hierarchy used across the library

from wire_query.exceptions.base import (
    CoreException,
    ValidationException,
    InvalidArgumentError,
    WireEncodingError,
    FrozenQuerySpecError,
    ConfigurationException,
)

__all__ = [
    "CoreException",
    "ValidationException",
    "InvalidArgumentError",
    "WireEncodingError",
    "FrozenQuerySpecError",
    "ConfigurationException",
]
