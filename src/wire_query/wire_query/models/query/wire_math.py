# ABOUTME: Pure functions that reduce query parameters into OP_QUERY wire values
# ABOUTME: Derives numberToReturn and the effective option flags from a read preference

from wire_query.interfaces.routing import AbstractReadPreference
from wire_query.models.query.query_option import QueryOption


def compute_number_to_return(limit: int, batch_size: int) -> int:
    """
    Resolves a limit and a batch size into the OP_QUERY numberToReturn value.

    Zero tells the server to use its default batch size. A negative value tells
    the server to return at most that many documents and close the cursor. A
    positive value is the size of the first batch; the server keeps a cursor
    open if more documents remain.

    Rules, first match wins:

    1. ``limit < 0``: the limit itself, a single batch with the cursor closed.
    2. ``limit == 0``: the batch size, no cap from the caller.
    3. ``batch_size == 0``: the limit, no batching preference.
    4. ``limit < abs(batch_size)``: the limit, since fewer documents are wanted
       than one batch holds. A negative batch size still contributes its magnitude.
    5. Otherwise the batch size, and paging continues.

    Values are not clamped or range checked.

    Args:
        limit: Maximum number of documents wanted overall.
        batch_size: Preferred number of documents per round trip.

    Returns:
        The signed numberToReturn value.
    """
    if limit < 0:
        return limit
    if limit == 0:
        return batch_size
    if batch_size == 0:
        return limit
    if limit < abs(batch_size):
        return limit
    return batch_size


def effective_options(flags: QueryOption, read_preference: AbstractReadPreference | None) -> QueryOption:
    """
    Computes the option flags a wire message must carry.

    Adds `QueryOption.SLAVE_OK` when the read preference permits non-primary
    members; otherwise returns `flags` as given.
    """
    if read_preference is not None and read_preference.is_slave_ok:
        return flags | QueryOption.SLAVE_OK
    return flags
