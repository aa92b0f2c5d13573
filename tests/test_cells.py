"""
Tests for H3 cell decoding and conversion.

Tests verify that:
- Hex text is scanned like scanf("%x")
- Bad text, oversized values and non-cells decode to Invalid
- Canonical strings and center coordinates come from the h3 library
"""

import h3
import pytest

from h3_filters.core.cells import (
    Coordinate,
    Decoded,
    Invalid,
    cell_to_coordinate,
    cell_to_string,
    decode_cell,
    parse_hex_index,
    validate_cell,
)
from tests.conftest import SF_CELL, VALID_CELLS


class TestParseHexIndex:
    """Tests for hexadecimal index scanning."""

    def test_plain_hex(self):
        assert parse_hex_index(SF_CELL) == int(SF_CELL, 16)

    def test_upper_case(self):
        assert parse_hex_index(SF_CELL.upper()) == int(SF_CELL, 16)

    def test_leading_whitespace_and_prefix(self):
        """Test that leading whitespace and a 0x prefix are accepted."""
        assert parse_hex_index(f"  0x{SF_CELL}") == int(SF_CELL, 16)

    def test_stops_at_first_non_hex_character(self):
        """Test that trailing text after the digits is ignored."""
        assert parse_hex_index(f"{SF_CELL}\n") == int(SF_CELL, 16)
        assert parse_hex_index(f"{SF_CELL} trailing") == int(SF_CELL, 16)

    def test_bare_0x_reads_zero(self):
        """Test that '0x' with no digits after it scans the leading zero."""
        assert parse_hex_index("0xg") == 0

    def test_no_digits(self):
        assert parse_hex_index("hello") is None
        assert parse_hex_index("") is None

    def test_max_64_bit_value(self):
        assert parse_hex_index("f" * 16) == 2**64 - 1

    def test_overflow(self):
        """Test that values wider than 64 bits are rejected."""
        assert parse_hex_index("1" + "0" * 16) is None


class TestDecodeCell:
    """Tests for line decoding into Decoded/Invalid results."""

    @pytest.mark.parametrize("cell", VALID_CELLS)
    def test_valid_cells(self, cell):
        result = decode_cell(f"{cell}\n")
        assert isinstance(result, Decoded)
        assert result.cell == int(cell, 16)
        assert result.source == cell

    def test_garbage(self):
        result = decode_cell("not a cell")
        assert isinstance(result, Invalid)
        assert result.source == "not a cell"
        assert "hexadecimal" in result.reason

    def test_overflow(self):
        result = decode_cell("f" * 20)
        assert isinstance(result, Invalid)
        assert "64 bits" in result.reason

    def test_zero_is_not_a_cell(self):
        """Test that a well-formed number that is not a cell is Invalid."""
        result = decode_cell("0")
        assert isinstance(result, Invalid)
        assert result.reason == "not a valid H3 cell"


class TestValidateCell:
    """Tests for validating scanned values."""

    def test_valid(self):
        result = validate_cell(int(SF_CELL, 16))
        assert result == Decoded(cell=int(SF_CELL, 16), source=SF_CELL)

    def test_invalid_uses_hex_source(self):
        result = validate_cell(0x1234)
        assert isinstance(result, Invalid)
        assert result.source == "1234"


class TestConversion:
    """Tests for canonical strings and center points."""

    @pytest.mark.parametrize("cell", VALID_CELLS)
    def test_canonical_string_round_trips(self, cell):
        assert cell_to_string(int(cell, 16)) == cell

    def test_center_matches_h3(self):
        lat, lng = h3.cell_to_latlng(SF_CELL)
        assert cell_to_coordinate(int(SF_CELL, 16)) == Coordinate(lat=lat, lng=lng)

    def test_center_is_in_san_francisco(self):
        coord = cell_to_coordinate(int(SF_CELL, 16))
        assert coord.lat == pytest.approx(37.7767, abs=1e-3)
        assert coord.lng == pytest.approx(-122.4185, abs=1e-3)
