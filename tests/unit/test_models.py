"""
Unit tests for the coaster domain model and body parsing.

These tests verify the core model without touching a store or HTTP.
"""

from dataclasses import FrozenInstanceError

import pytest

from coaster_api.core.coasters.errors import InvalidCoasterError
from coaster_api.core.coasters.models import Coaster, parse_coaster_payload


# ---------------------------------------------------------------------------
# Coaster Tests
# ---------------------------------------------------------------------------

class TestCoaster:
    """Tests for the Coaster value object."""

    def test_coaster_is_immutable(self):
        """Stored coasters are handed out as-is, so they must not be mutable."""
        coaster = Coaster(id="1", name="Loop")

        with pytest.raises(FrozenInstanceError):
            coaster.name = "Changed"

    def test_with_id_returns_a_copy(self):
        original = Coaster(id="old", name="Loop", height=50)

        moved = original.with_id("new")

        assert moved.id == "new"
        assert moved.name == "Loop"
        assert original.id == "old"

    def test_to_dict_uses_wire_field_names(self):
        coaster = Coaster(
            id="1",
            name="Loop",
            manufacturer="Acme",
            in_park="Six Flags",
            height=50,
        )

        assert coaster.to_dict() == {
            "id": "1",
            "name": "Loop",
            "manufacturer": "Acme",
            "in_park": "Six Flags",
            "height": 50,
        }


# ---------------------------------------------------------------------------
# Payload Parsing Tests
# ---------------------------------------------------------------------------

class TestParseCoasterPayload:
    """Tests for turning a raw request body into a coaster."""

    def test_parses_complete_body(self):
        payload = parse_coaster_payload(
            b'{"name":"Loop","manufacturer":"Acme","in_park":"Six Flags","height":50}'
        )

        coaster = payload.to_coaster("abc")

        assert coaster == Coaster(
            id="abc",
            name="Loop",
            manufacturer="Acme",
            in_park="Six Flags",
            height=50,
        )

    def test_body_id_is_ignored(self):
        """The caller never chooses the id."""
        payload = parse_coaster_payload(b'{"id":"attacker","name":"Loop"}')

        assert payload.to_coaster("assigned").id == "assigned"

    def test_missing_fields_default_to_empty(self):
        coaster = parse_coaster_payload(b"{}").to_coaster("1")

        assert coaster.name == ""
        assert coaster.manufacturer == ""
        assert coaster.in_park == ""
        assert coaster.height == 0

    def test_unknown_fields_are_ignored(self):
        coaster = parse_coaster_payload(b'{"name":"Loop","speed":120}').to_coaster("1")

        assert coaster.name == "Loop"

    def test_rejects_malformed_json(self):
        with pytest.raises(InvalidCoasterError):
            parse_coaster_payload(b'{"name": "Loop",')

    def test_rejects_empty_body(self):
        with pytest.raises(InvalidCoasterError):
            parse_coaster_payload(b"")

    def test_rejects_non_object_json(self):
        with pytest.raises(InvalidCoasterError):
            parse_coaster_payload(b"[1, 2, 3]")

    def test_rejects_string_height(self):
        """Height is an integer; "50" is not accepted."""
        with pytest.raises(InvalidCoasterError, match="height"):
            parse_coaster_payload(b'{"height":"50"}')

    def test_rejects_fractional_height(self):
        with pytest.raises(InvalidCoasterError, match="height"):
            parse_coaster_payload(b'{"height":50.5}')

    def test_rejects_numeric_name(self):
        with pytest.raises(InvalidCoasterError, match="name"):
            parse_coaster_payload(b'{"name":42}')

    def test_accepts_64_bit_height_bounds(self):
        low = parse_coaster_payload(b'{"height":-9223372036854775808}')
        high = parse_coaster_payload(b'{"height":9223372036854775807}')

        assert low.height == -(2**63)
        assert high.height == 2**63 - 1

    def test_rejects_height_beyond_64_bits(self):
        with pytest.raises(InvalidCoasterError):
            parse_coaster_payload(b'{"height":18446744073709551616}')

    def test_rejects_height_just_past_64_bit_limit(self):
        with pytest.raises(InvalidCoasterError, match="height"):
            parse_coaster_payload(b'{"height":9223372036854775808}')
