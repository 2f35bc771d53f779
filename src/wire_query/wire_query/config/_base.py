# ABOUTME: Base configuration classes for the wire query library
# ABOUTME: Provides fundamental configuration settings and validation logic

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wire_query.exceptions import ConfigurationException
from wire_query.models.routing import ReadPreferenceMode


class BaseCoreSettings(BaseSettings):
    """Defines the foundational configuration for the library.

    This class holds the parameters that are not tied to one query. It leverages
    `pydantic-settings` to load configurations from environment variables or
    `.env` files, so deployments can change the defaults injected into query
    specs without code changes.

    Attributes:
        APP_NAME: The name of the application, used for identification in logs.
        ENV: The runtime environment, which controls environment-specific behaviors like logging levels.
        DEBUG: A flag to enable or disable debug mode.
        LOG_LEVEL: The minimum level for log messages to be processed.
        LOG_FORMAT: The format for log output, supporting structured (JSON) and human-readable (txt) formats.
        DEFAULT_READ_PREFERENCE: The read preference mode injected into specs that do not set one.
        DEFAULT_BATCH_SIZE: The batch size injected into specs whose batch size is 0.
        model_config: Pydantic's configuration dictionary, specifying how settings are loaded.
    """

    # Application Identity
    APP_NAME: str = Field(
        default="WireQuery",
        description="The name of the application, used for identification in logs.",
    )

    # Environment Configuration
    ENV: Literal["development", "staging", "production"] = Field(
        default="development",
        description="The application's runtime environment. Controls features like logging verbosity.",
    )
    DEBUG: bool = Field(
        default=False,
        description="Flag to enable or disable debug mode. Should be False in production.",
    )

    # Logging Configuration
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="The minimum level for log messages to be processed.",
    )
    LOG_FORMAT: Literal["json", "txt"] = Field(
        default="txt",
        description="The output format for logs. Use 'json' for production environments.",
    )

    # Query Defaults
    DEFAULT_READ_PREFERENCE: ReadPreferenceMode = Field(
        default=ReadPreferenceMode.PRIMARY,
        description="Read preference mode applied to queries that do not choose one.",
    )
    DEFAULT_BATCH_SIZE: int = Field(
        default=0,
        description="Batch size applied to queries that leave it at 0. 0 lets the server choose.",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("ENV", mode="before")
    @classmethod
    def validate_env_case_insensitive(cls, v: str) -> str:
        """Validate ENV field with case-insensitive mapping.

        Accepts common environment aliases and normalizes them:
        - dev, develop -> development
        - prod -> production
        - stage -> staging
        """
        if isinstance(v, str):
            v_lower = v.lower().strip()
            env_mapping = {
                "dev": "development",
                "develop": "development",
                "development": "development",
                "stage": "staging",
                "staging": "staging",
                "prod": "production",
                "production": "production",
            }
            return env_mapping.get(v_lower, v_lower)
        return v

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def validate_log_level_case_insensitive(cls, v: str) -> str:
        """Validate LOG_LEVEL field with case-insensitive normalization."""
        if isinstance(v, str):
            return v.upper().strip()
        return v

    @field_validator("LOG_FORMAT", mode="before")
    @classmethod
    def validate_log_format_case_insensitive(cls, v: str) -> str:
        """Validate LOG_FORMAT field with case-insensitive normalization."""
        if isinstance(v, str):
            v_lower = v.lower().strip()
            format_mapping = {
                "json": "json",
                "structured": "json",
                "txt": "txt",
                "text": "txt",
            }
            return format_mapping.get(v_lower, v_lower)
        return v

    @field_validator("DEFAULT_READ_PREFERENCE", mode="before")
    @classmethod
    def validate_read_preference_mode(cls, v: object) -> object:
        """Validate DEFAULT_READ_PREFERENCE, accepting driver and enum spellings.

        `secondaryPreferred`, `SECONDARY_PREFERRED` and `secondary-preferred`
        all resolve to the same mode.

        Raises:
            ValueError: If the value names no known read preference mode.
        """
        if isinstance(v, str):
            try:
                return ReadPreferenceMode.parse(v)
            except ConfigurationException as e:
                raise ValueError(e.message) from e
        return v
