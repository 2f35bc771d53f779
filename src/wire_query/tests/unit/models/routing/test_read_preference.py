# ABOUTME: Unit tests for the ReadPreference model and its modes
# ABOUTME: Tests slave-ok semantics, mode parsing, tag sets, equality and hashing

import pytest
from pydantic import ValidationError

from wire_query.exceptions import ConfigurationException
from wire_query.interfaces.routing import AbstractReadPreference
from wire_query.models.routing.read_preference import ReadPreference, ReadPreferenceMode


class TestReadPreferenceMode:
    """Test cases for ReadPreferenceMode."""

    @pytest.mark.unit
    def test_wire_spellings(self):
        assert ReadPreferenceMode.PRIMARY.value == "primary"
        assert ReadPreferenceMode.PRIMARY_PREFERRED.value == "primaryPreferred"
        assert ReadPreferenceMode.SECONDARY.value == "secondary"
        assert ReadPreferenceMode.SECONDARY_PREFERRED.value == "secondaryPreferred"
        assert ReadPreferenceMode.NEAREST.value == "nearest"
        assert str(ReadPreferenceMode.NEAREST) == "nearest"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "raw",
        ["secondaryPreferred", "SECONDARY_PREFERRED", "secondary-preferred", " secondarypreferred "],
    )
    def test_parse_accepts_variants(self, raw):
        assert ReadPreferenceMode.parse(raw) is ReadPreferenceMode.SECONDARY_PREFERRED

    @pytest.mark.unit
    def test_parse_passes_members_through(self):
        assert ReadPreferenceMode.parse(ReadPreferenceMode.NEAREST) is ReadPreferenceMode.NEAREST

    @pytest.mark.unit
    def test_parse_rejects_unknown_mode(self):
        with pytest.raises(ConfigurationException) as exc_info:
            ReadPreferenceMode.parse("tertiary")

        assert exc_info.value.code == "UNKNOWN_READ_PREFERENCE"
        assert "primary" in exc_info.value.details["valid_modes"]


class TestReadPreference:
    """Test cases for ReadPreference."""

    @pytest.mark.unit
    def test_default_is_primary(self):
        read_preference = ReadPreference()

        assert read_preference.mode is ReadPreferenceMode.PRIMARY
        assert read_preference.is_slave_ok is False

    @pytest.mark.unit
    def test_implements_interface(self):
        assert isinstance(ReadPreference.primary(), AbstractReadPreference)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "factory, expected",
        [
            (ReadPreference.primary, False),
            (ReadPreference.primary_preferred, True),
            (ReadPreference.secondary, True),
            (ReadPreference.secondary_preferred, True),
            (ReadPreference.nearest, True),
        ],
    )
    def test_is_slave_ok(self, factory, expected):
        assert factory().is_slave_ok is expected

    @pytest.mark.unit
    def test_from_mode(self):
        assert ReadPreference.from_mode("nearest") == ReadPreference.nearest()
        assert ReadPreference(mode="SECONDARY").mode is ReadPreferenceMode.SECONDARY

    @pytest.mark.unit
    def test_tag_sets_normalized(self):
        read_preference = ReadPreference.secondary(tag_sets=[{"rack": "r1", "dc": "east"}, {}])

        assert read_preference.tag_sets == ((("dc", "east"), ("rack", "r1")), ())

    @pytest.mark.unit
    @pytest.mark.parametrize("bad_mode", ["bogus", "tertiary", ""])
    def test_unknown_mode_raises_validation_error(self, bad_mode):
        """Unknown modes fail with the same error type as other invalid input."""
        with pytest.raises(ValidationError, match="Unknown read preference mode"):
            ReadPreference(mode=bad_mode)

    @pytest.mark.unit
    def test_primary_rejects_tag_sets(self):
        with pytest.raises(ValidationError, match="tag sets cannot be combined"):
            ReadPreference(mode="primary", tag_sets=[{"dc": "east"}])

    @pytest.mark.unit
    def test_equality_and_hash(self):
        first = ReadPreference.nearest(tag_sets=[{"dc": "east", "rack": "r1"}])
        second = ReadPreference.nearest(tag_sets=[{"rack": "r1", "dc": "east"}])

        assert first == second
        assert hash(first) == hash(second)
        assert first != ReadPreference.nearest()
        assert ReadPreference.secondary() != ReadPreference.secondary_preferred()

    @pytest.mark.unit
    def test_is_immutable(self):
        read_preference = ReadPreference.secondary()

        with pytest.raises(ValidationError):
            read_preference.mode = ReadPreferenceMode.PRIMARY

    @pytest.mark.unit
    def test_to_dict(self):
        assert ReadPreference.primary().to_dict() == {"mode": "primary"}
        assert ReadPreference.secondary(tag_sets=[{"dc": "east"}]).to_dict() == {
            "mode": "secondary",
            "tags": [{"dc": "east"}],
        }


class TestAbstractReadPreference:
    """Test cases for the read preference interface defaults."""

    @pytest.mark.unit
    def test_default_to_dict(self):
        class SecondaryOnly(AbstractReadPreference):
            @property
            def is_slave_ok(self) -> bool:
                return True

        assert SecondaryOnly().to_dict() == {"type": "SecondaryOnly", "is_slave_ok": True}
