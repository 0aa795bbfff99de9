"""Tests for is_valid_json."""

from __future__ import annotations

import logging

import pytest

from octoprint_format.jsoncheck import is_valid_json


class TestIsValidJson:
    @pytest.mark.parametrize(
        "text",
        ["{}", "[]", '{"state": "Printing"}', "42", '"text"', "null", " true "],
    )
    def test_valid_json(self, text: str) -> None:
        assert is_valid_json(text) is True

    @pytest.mark.parametrize("text", ["{", "", "   ", "{'a': 1}", "[1,]", "undefined"])
    def test_invalid_json(self, text: str) -> None:
        assert is_valid_json(text) is False

    def test_non_string_input(self) -> None:
        """Non-strings are never valid, even if they would serialize."""
        assert is_valid_json(123) is False
        assert is_valid_json(None) is False
        assert is_valid_json({"a": 1}) is False
        assert is_valid_json(b"{}") is False

    def test_rejects_nan_and_infinity_literals(self) -> None:
        assert is_valid_json("NaN") is False
        assert is_valid_json('{"t": Infinity}') is False
        assert is_valid_json("[-Infinity]") is False

    def test_logs_parse_failure_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="octoprint_format.jsoncheck"):
            is_valid_json("{")
        assert "Invalid JSON string" in caplog.text

    def test_deep_nesting_returns_false_instead_of_raising(self) -> None:
        """Nesting past the parser's recursion limit is reported, never raised."""
        text = "[" * 100000 + "]" * 100000
        assert is_valid_json(text) is False

    def test_integer_beyond_int_conversion_limit(self) -> None:
        """Integers longer than Python's str-to-int digit limit are still valid JSON."""
        assert is_valid_json("1" * 5000) is True
        assert is_valid_json('{"n": ' + "9" * 5000 + "}") is True
