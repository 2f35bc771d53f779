# ABOUTME: Core package initialization for the wire query library
# ABOUTME: Provides the OP_QUERY parameter model and its wire value derivations

"""
Wire query package.

This package models the parameters of a single outbound OP_QUERY request:
skip, limit, batch size, option flags and read preference. It reduces them to
the flag bit-field and numberToReturn value a transport writes into the
message. It performs no I/O and encodes no documents.
"""

__version__ = "0.1.0"
