# ABOUTME: Query models package exports
# ABOUTME: Exports the query spec, option flags, wire snapshot and derivation functions

from .query_option import QueryOption
from .query_spec import QuerySpec
from .wire_fields import QueryWireFields
from .wire_math import compute_number_to_return, effective_options

__all__ = [
    "QueryOption",
    "QuerySpec",
    "QueryWireFields",
    "compute_number_to_return",
    "effective_options",
]
