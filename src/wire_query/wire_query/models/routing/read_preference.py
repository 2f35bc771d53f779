# ABOUTME: Read preference model describing which replica members may serve a query
# ABOUTME: Provides the standard driver modes with optional tag sets

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from wire_query.exceptions import ConfigurationException
from wire_query.interfaces.routing import AbstractReadPreference


class ReadPreferenceMode(str, Enum):
    """
    Enumeration of read preference modes.

    Attributes:
        PRIMARY (str): Only the primary may serve reads.
        PRIMARY_PREFERRED (str): The primary when available, otherwise a secondary.
        SECONDARY (str): Only secondaries may serve reads.
        SECONDARY_PREFERRED (str): A secondary when available, otherwise the primary.
        NEAREST (str): The member with the lowest network latency, whatever its role.
    """

    PRIMARY = "primary"
    PRIMARY_PREFERRED = "primaryPreferred"
    SECONDARY = "secondary"
    SECONDARY_PREFERRED = "secondaryPreferred"
    NEAREST = "nearest"

    @classmethod
    def parse(cls, value: "str | ReadPreferenceMode") -> "ReadPreferenceMode":
        """
        Resolves a mode from its wire spelling, its member name, or a loose variant.

        `secondaryPreferred`, `SECONDARY_PREFERRED` and `secondary-preferred`
        all resolve to the same member.

        Raises:
            ConfigurationException: If the value names no known mode.
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().replace("-", "").replace("_", "").lower()
        for member in cls:
            if member.value.lower() == normalized:
                return member
        raise ConfigurationException(
            f"Unknown read preference mode '{value}'",
            code="UNKNOWN_READ_PREFERENCE",
            details={"value": str(value), "valid_modes": [m.value for m in cls]},
        )

    def __str__(self) -> str:
        return self.value


TagSet = tuple[tuple[str, str], ...]


class ReadPreference(BaseModel, AbstractReadPreference):
    """
    [L0] Immutable read-routing directive.

    Only `PRIMARY` forbids non-primary members, so every other mode reports
    `is_slave_ok`. Tag sets narrow which secondaries are eligible and are kept
    as sorted tuples so that equal preferences hash equally.

    Attributes:
        mode: The routing mode.
        tag_sets: Ordered candidate tag sets; each one is a tuple of (key, value) pairs.
    """

    model_config = ConfigDict(frozen=True)

    mode: ReadPreferenceMode = Field(default=ReadPreferenceMode.PRIMARY)
    tag_sets: tuple[TagSet, ...] = Field(default=())

    @field_validator("mode", mode="before")
    @classmethod
    def validate_mode(cls, v: Any) -> ReadPreferenceMode:
        """Resolve the mode, reporting unknown names as validation errors."""
        try:
            return ReadPreferenceMode.parse(v)
        except ConfigurationException as e:
            raise ValueError(e.message) from e

    @field_validator("tag_sets", mode="before")
    @classmethod
    def normalize_tag_sets(cls, v: Any) -> Any:
        """Accept a list of dicts and store each as sorted (key, value) pairs."""
        if v is None:
            return ()
        normalized = []
        for tag_set in v:
            items = tag_set.items() if isinstance(tag_set, dict) else tag_set
            normalized.append(tuple(sorted((str(k), str(val)) for k, val in items)))
        return tuple(normalized)

    @model_validator(mode="after")
    def validate_primary_has_no_tags(self) -> "ReadPreference":
        if self.mode is ReadPreferenceMode.PRIMARY and self.tag_sets:
            raise ValueError("tag sets cannot be combined with the primary read preference")
        return self

    @property
    def is_slave_ok(self) -> bool:
        return self.mode is not ReadPreferenceMode.PRIMARY

    @classmethod
    def primary(cls) -> "ReadPreference":
        return cls(mode=ReadPreferenceMode.PRIMARY)

    @classmethod
    def primary_preferred(cls, tag_sets: Any = None) -> "ReadPreference":
        return cls(mode=ReadPreferenceMode.PRIMARY_PREFERRED, tag_sets=tag_sets)

    @classmethod
    def secondary(cls, tag_sets: Any = None) -> "ReadPreference":
        return cls(mode=ReadPreferenceMode.SECONDARY, tag_sets=tag_sets)

    @classmethod
    def secondary_preferred(cls, tag_sets: Any = None) -> "ReadPreference":
        return cls(mode=ReadPreferenceMode.SECONDARY_PREFERRED, tag_sets=tag_sets)

    @classmethod
    def nearest(cls, tag_sets: Any = None) -> "ReadPreference":
        return cls(mode=ReadPreferenceMode.NEAREST, tag_sets=tag_sets)

    @classmethod
    def from_mode(cls, mode: "str | ReadPreferenceMode") -> "ReadPreference":
        """Builds an untagged preference from a mode name."""
        return cls(mode=ReadPreferenceMode.parse(mode))

    def to_dict(self) -> dict[str, Any]:
        """
        Converts the preference to the document form used in `$readPreference`.

        Returns:
            A dictionary with the mode and, when present, the tag sets as dicts.
        """
        result: dict[str, Any] = {"mode": self.mode.value}
        if self.tag_sets:
            result["tags"] = [dict(tag_set) for tag_set in self.tag_sets]
        return result
