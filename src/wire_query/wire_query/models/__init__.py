# ABOUTME: Models package initialization
# ABOUTME: Exports the query parameter model and read routing models

# Routing models
from .routing import ReadPreference, ReadPreferenceMode

# Query models
from .query import (
    QueryOption,
    QuerySpec,
    QueryWireFields,
    compute_number_to_return,
    effective_options,
)

__all__ = [
    # Routing
    "ReadPreference",
    "ReadPreferenceMode",
    # Query
    "QueryOption",
    "QuerySpec",
    "QueryWireFields",
    "compute_number_to_return",
    "effective_options",
]
