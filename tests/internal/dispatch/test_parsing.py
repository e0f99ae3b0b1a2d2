"""Tests for JSON parsing strategies."""

import pytest

from mirlo_node._internal.dispatch.parsing import lenient_parse, strict_parse
from mirlo_node.exceptions import MirloValidationError


class TestLenientParse:
    """Tests for lenient_parse."""

    def test_parses_valid_json(self):
        """Should decode valid JSON text."""
        assert lenient_parse('[{"type": "body"}]', default=[]) == [{"type": "body"}]

    def test_malformed_returns_default(self):
        """Should return the default for malformed JSON."""
        assert lenient_parse("not json", default=[]) == []

    def test_none_returns_default(self):
        """Should return the default for a missing value."""
        assert lenient_parse(None, default=[]) == []

    def test_decoded_value_passes_through(self):
        """Should return decoded lists and dicts unchanged."""
        value = [{"type": "header"}]
        assert lenient_parse(value, default=[]) is value


class TestStrictParse:
    """Tests for strict_parse."""

    def test_parses_valid_json(self):
        """Should decode valid JSON text."""
        assert strict_parse('[{"phone_number": "+1"}]', field="recipients") == [
            {"phone_number": "+1"}
        ]

    def test_malformed_raises(self):
        """Should raise MirloValidationError naming the field."""
        with pytest.raises(MirloValidationError) as exc_info:
            strict_parse("not json", field="recipients")
        assert str(exc_info.value) == "Invalid recipients JSON format"

    def test_empty_string_raises(self):
        """An empty string is not valid JSON."""
        with pytest.raises(MirloValidationError):
            strict_parse("", field="recipients")

    def test_decoded_value_passes_through(self):
        """Should return decoded lists and dicts unchanged."""
        value = {"phone_number": "+1"}
        assert strict_parse(value, field="recipients") is value
