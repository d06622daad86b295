"""
tests/unit/test_fields.py
=========================
Tests for the immutable SemverFields record: projections, numeric view,
non-mutating bumps and "with field changed" helpers.
"""
import dataclasses
import math

import pytest

from semverkit.core.types import NO_PATCH, SemverFields, VersionPart, format_segments


class TestFormatSegments:
    def test_full(self):
        assert format_segments("1", "2", "3", "rc1") == "1.2.3-rc1"

    def test_absent_optional(self):
        assert format_segments("1", "2", None, None) == "1.2"

    def test_empty_suffix_no_dash(self):
        assert format_segments("1", "2", "3", "") == "1.2.3"


class TestSemverFields:
    def test_frozen(self, release_fields):
        with pytest.raises(dataclasses.FrozenInstanceError):
            release_fields.major = "9"

    def test_hashable(self, release_fields):
        assert {release_fields: "ok"}[SemverFields("1", "4", "2")] == "ok"

    def test_to_record_and_array(self):
        f = SemverFields("1", "0", suffix="dev")
        assert f.to_record() == {"major": "1", "minor": "0", "suffix": "dev"}
        assert f.to_array() == ["1", "0", "dev"]

    def test_from_mapping(self):
        f = SemverFields.from_mapping({"major": 1, "minor": 2, "patch": None})
        assert f == SemverFields("1", "2")

    def test_from_mapping_missing(self):
        assert SemverFields.from_mapping({"major": "1"}) is None

    def test_from_mapping_bool_rendered_lowercase(self):
        f = SemverFields.from_mapping({"major": 1, "minor": 0, "suffix": True})
        assert f.suffix == "true"


class TestNumberView:
    def test_numbers(self, release_fields):
        assert release_fields.number(VersionPart.MAJOR) == 1
        assert release_fields.number(VersionPart.MINOR) == 4
        assert release_fields.number(VersionPart.PATCH) == 2

    def test_patch_sentinel(self):
        assert SemverFields("1", "0").number(VersionPart.PATCH) == NO_PATCH
        assert SemverFields("1", "0", "").number(VersionPart.PATCH) == NO_PATCH
        assert SemverFields("1", "0", "x").number(VersionPart.PATCH) == NO_PATCH

    def test_major_nan(self):
        assert math.isnan(SemverFields("v1", "0").number(VersionPart.MAJOR))


class TestBumped:
    def test_bump_does_not_mutate(self, release_fields):
        bumped = release_fields.bumped(VersionPart.PATCH)
        assert str(bumped) == "1.4.3"
        assert str(release_fields) == "1.4.2"

    def test_bump_no_cascade(self, release_fields):
        assert str(release_fields.bumped(VersionPart.MAJOR)) == "2.4.2"

    def test_bump_cascade(self, release_fields):
        assert str(release_fields.bumped(VersionPart.MAJOR, cascade=True)) == "2.0.0"
        assert str(release_fields.bumped(VersionPart.MINOR, cascade=True)) == "1.5.0"

    def test_bump_amount(self, release_fields):
        assert str(release_fields.bumped(VersionPart.MINOR, amount=5)) == "1.9.2"

    def test_incremented_returns_value(self, release_fields):
        fields, value = release_fields.incremented(VersionPart.PATCH, 2)
        assert value == 4
        assert fields.patch == "4"

    def test_bump_absent_patch(self):
        assert str(SemverFields("1", "0").bumped(VersionPart.PATCH)) == "1.0.0"

    def test_suffix_kept(self):
        f = SemverFields("1", "0", "0", "rc1")
        assert str(f.bumped(VersionPart.MAJOR, cascade=True)) == "2.0.0-rc1"


class TestWithField:
    def test_with_major(self, release_fields):
        assert str(release_fields.with_major(3)) == "3.4.2"

    def test_with_minor(self, release_fields):
        assert release_fields.with_minor("7").minor == "7"

    def test_with_patch_none_clears(self, release_fields):
        assert release_fields.with_patch(None).patch is None

    def test_with_suffix(self, release_fields):
        assert str(release_fields.with_suffix("beta")) == "1.4.2-beta"


class TestNumericStoredFields:
    def test_format_with_ints(self):
        assert format_segments(1, 0, 0, None) == "1.0.0"

    def test_number_with_int_patch(self):
        assert SemverFields("1", "0", 0).number(VersionPart.PATCH) == 0
