"""Unit tests for the total payload accessor."""

from __future__ import annotations

import pytest

from ghactivity.events.accessor import (
    get_int,
    get_mapping,
    get_nested_string,
    get_string,
)


class TestGetString:
    """Tests for get_string."""

    def test_returns_string_value(self) -> None:
        """String values are returned unchanged."""
        assert get_string({"action": "opened"}, "action") == "opened"

    @pytest.mark.parametrize(
        "container",
        [None, "text", 3, ["action"], {"action": 1}, {"action": None}, {}],
    )
    def test_non_string_or_missing_yields_none(self, container: object) -> None:
        """Missing keys, mistyped values and non-mappings yield None."""
        assert get_string(container, "action") is None, (
            f"expected None for {container!r}"
        )


class TestGetInt:
    """Tests for get_int."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (3, 3),
            (0, 0),
            (-2, -2),
            (2.9, 2),
            ("3", 0),
            (None, 0),
            (True, 0),
            (float("nan"), 0),
            (float("inf"), 0),
            ([1], 0),
        ],
    )
    def test_coerces_or_defaults(self, value: object, expected: int) -> None:
        """Integers and finite floats pass; everything else defaults to 0."""
        assert get_int({"size": value}, "size") == expected, (
            f"unexpected int for {value!r}"
        )

    def test_missing_key_and_non_mapping_default_to_zero(self) -> None:
        """Absent keys and non-mapping containers yield 0."""
        assert get_int({}, "size") == 0
        assert get_int("size", "size") == 0
        assert get_int(None, "size") == 0


class TestNestedLookups:
    """Tests for get_mapping and get_nested_string."""

    def test_get_mapping_returns_nested_mapping(self) -> None:
        """Nested objects are returned as mappings."""
        assert get_mapping({"issue": {"title": "Bug"}}, "issue") == {"title": "Bug"}

    def test_get_mapping_rejects_non_mapping(self) -> None:
        """Lists and scalars under the key yield None."""
        assert get_mapping({"issue": ["Bug"]}, "issue") is None
        assert get_mapping({"issue": "Bug"}, "issue") is None

    def test_get_nested_string_follows_path(self) -> None:
        """A string leaf is found through nested objects."""
        payload = {"pull_request": {"head": {"ref": "main"}}}
        assert get_nested_string(payload, "pull_request", "head", "ref") == "main"

    @pytest.mark.parametrize(
        "payload",
        [
            {"issue": "Bug"},
            {"issue": {"title": 7}},
            {"issue": None},
            {},
            None,
            [],
        ],
    )
    def test_get_nested_string_short_circuits(self, payload: object) -> None:
        """Malformed nesting yields None rather than raising."""
        assert get_nested_string(payload, "issue", "title") is None

    def test_get_nested_string_without_path_is_none(self) -> None:
        """An empty path has no leaf to read."""
        assert get_nested_string({"a": "b"}) is None
