# ABOUTME: Applies configured query defaults to query specs
# ABOUTME: Injects the default read preference and batch size without overriding caller choices

from loguru import logger

from wire_query.config.settings import CoreSettings, get_settings
from wire_query.models.query import QuerySpec
from wire_query.models.routing import ReadPreference


def apply_defaults(spec: QuerySpec, settings: CoreSettings | None = None) -> QuerySpec:
    """
    Fills in the configured defaults on a query spec.

    The read preference is injected with `set_read_preference_if_absent`, so an
    explicit caller choice wins. The batch size is only replaced when it is 0.

    Args:
        spec: The spec to update. It must not be frozen.
        settings: Settings to read. Defaults to `get_settings()`.

    Returns:
        The same spec, for chaining.

    Raises:
        FrozenQuerySpecError: If the spec has already been frozen.
    """
    settings = settings or get_settings()

    if spec.read_preference is None:
        logger.debug("Injecting default read preference", mode=settings.DEFAULT_READ_PREFERENCE.value)
    spec.set_read_preference_if_absent(ReadPreference.from_mode(settings.DEFAULT_READ_PREFERENCE))

    if spec.batch_size == 0 and settings.DEFAULT_BATCH_SIZE != 0:
        logger.debug("Injecting default batch size", batch_size=settings.DEFAULT_BATCH_SIZE)
        spec.set_batch_size(settings.DEFAULT_BATCH_SIZE)

    return spec
