"""Tests for captured values."""

import pytest
from pydantic import ValidationError

from pathroute import Captures


class TestCaptures:
    def test_default_is_empty(self):
        """Test Captures with no values"""
        captures = Captures()

        assert captures.params == ()
        assert captures.wildcard is None
        assert captures.is_empty()

    def test_lookup_by_name(self):
        """Test get, [] and in"""
        captures = Captures(params=[("id", "42"), ("post_id", "7")])

        assert captures.get("id") == "42"
        assert captures["post_id"] == "7"
        assert "id" in captures
        assert "missing" not in captures
        assert captures.get("missing") is None
        assert captures.get("missing", "fallback") == "fallback"

        with pytest.raises(KeyError):
            captures["missing"]

    def test_params_from_mapping(self):
        """Test params may be given as a dict"""
        captures = Captures(params={"id": "42"})
        assert captures.params == (("id", "42"),)

    def test_repeated_name_is_last_write_visible(self):
        """Test a repeated parameter name keeps both pairs, lookups see the last"""
        captures = Captures(params=[("id", "1"), ("id", "2")])

        assert captures.params == (("id", "1"), ("id", "2"))
        assert captures.get("id") == "2"
        assert captures.as_dict() == {"id": "2"}
        assert captures.names() == ["id"]

    def test_wildcard_only(self):
        """Test a wildcard without params is not empty"""
        captures = Captures(wildcard="")

        assert not captures.is_empty()
        assert captures.wildcard == ""

    def test_immutability(self):
        """Test Captures is frozen"""
        captures = Captures(params={"id": "42"})

        with pytest.raises(ValidationError):
            captures.wildcard = "x"

    def test_extra_fields_rejected(self):
        """Test unknown fields are rejected"""
        with pytest.raises(ValidationError):
            Captures(named_wildcard="x")

    def test_equality(self):
        """Test value equality"""
        assert Captures(params={"id": "1"}) == Captures(params=[("id", "1")])
        assert Captures(params={"id": "1"}) != Captures(params={"id": "2"})

    def test_string_representation(self):
        """Test str output"""
        captures = Captures(params={"id": "42"}, wildcard="a/b")
        assert str(captures) == "id=42, *=a/b"
