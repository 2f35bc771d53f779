# ABOUTME: This module defines the OP_QUERY option flags as a bit-set enumeration
# ABOUTME: It provides normalization from user input and decoding from wire bit-fields

from collections.abc import Iterable
from enum import IntFlag
from typing import Any

from wire_query.exceptions import InvalidArgumentError


class QueryOption(IntFlag):
    """
    [L0] Query behavior flags carried in the OP_QUERY flags field.

    Each member sits at the bit position the wire protocol assigns to it, so a
    combined value is both the symbolic set of options and the integer the
    transport packs into the message. Bit 0 is reserved by the protocol and has
    no member.

    Attributes:
        NONE (int): The empty option set.
        TAILABLE_CURSOR (int): Keep the cursor open after the last document is returned.
        SLAVE_OK (int): Allow the query to run against a non-primary replica member.
        OPLOG_REPLAY (int): Internal replication flag for oplog scans.
        NO_CURSOR_TIMEOUT (int): Prevent the server from timing out an idle cursor.
        AWAIT_DATA (int): Block a tailable cursor for a while when no data is available.
        EXHAUST (int): Stream all batches without waiting for getMore requests.
        PARTIAL (int): Return partial results when some shards are unavailable.
    """

    NONE = 0
    TAILABLE_CURSOR = 1 << 1
    SLAVE_OK = 1 << 2
    OPLOG_REPLAY = 1 << 3
    NO_CURSOR_TIMEOUT = 1 << 4
    AWAIT_DATA = 1 << 5
    EXHAUST = 1 << 6
    PARTIAL = 1 << 7

    @classmethod
    def all_known(cls) -> "QueryOption":
        """Returns the union of every defined option."""
        result = cls.NONE
        for member in cls.__members__.values():
            result |= member
        return result

    @classmethod
    def coerce(cls, options: Any) -> "QueryOption":
        """
        Normalizes a caller-supplied option set into a single `QueryOption` value.

        Accepts either a `QueryOption` (single member or combination) or any
        iterable of `QueryOption` members. Duplicates collapse and order is
        irrelevant, as with any set.

        Args:
            options: The option set to normalize.

        Returns:
            The combined `QueryOption` value.

        Raises:
            InvalidArgumentError: If `options` is None, is not iterable, or
                contains anything other than `QueryOption` members.
        """
        if options is None:
            raise InvalidArgumentError("options must not be None")
        if isinstance(options, cls):
            return options
        if isinstance(options, (str, bytes)) or not isinstance(options, Iterable):
            raise InvalidArgumentError(
                "options must be a QueryOption or an iterable of QueryOption members",
                details={"type": type(options).__name__},
            )

        result = cls.NONE
        for option in options:
            if not isinstance(option, cls):
                raise InvalidArgumentError(
                    "options may only contain QueryOption members",
                    details={"invalid_member": repr(option)},
                )
            result |= option
        return result

    @classmethod
    def from_bits(cls, bits: int) -> "QueryOption":
        """
        Decodes an OP_QUERY flags bit-field into a `QueryOption` value.

        Args:
            bits: The raw integer read from a wire message.

        Returns:
            The decoded option set.

        Raises:
            InvalidArgumentError: If `bits` is negative or has bits set that no
                option occupies.
        """
        unknown = bits & ~int(cls.all_known())
        if bits < 0 or unknown:
            raise InvalidArgumentError(
                f"Unknown query option bits: {bits:#x}",
                details={"bits": bits, "unknown_bits": unknown},
            )
        return cls(bits)

    def names(self) -> list[str]:
        """Returns the member names contained in this option set, lowest bit first."""
        return [member.name for member in type(self) if member and member in self]
