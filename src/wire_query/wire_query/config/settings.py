# ABOUTME: Main configuration composition for the library.
# ABOUTME: Assembles all configuration classes into a single, accessible object.

from functools import lru_cache

from ._base import BaseCoreSettings


class CoreSettings(BaseCoreSettings):
    """Represents the complete, composed configuration for the library.

    This class acts as the final aggregator for all configuration settings.
    It inherits from `BaseCoreSettings` and is designed to be extended with
    transport-specific settings classes through inheritance.

    The `get_settings` function provides a singleton instance of this class.
    """

    pass


@lru_cache
def get_settings() -> CoreSettings:
    """Provides a singleton instance of the library settings.

    This function uses a cache (`lru_cache`) so that environment variables and
    `.env` files are read once, and every caller sees the same configuration.

    Returns:
        A single, cached instance of the CoreSettings class.
    """
    return CoreSettings()
