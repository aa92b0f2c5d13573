#!/usr/bin/env python3
"""
H3 cell index decoding and conversion.

Cell indexes arrive as hexadecimal text, either from the --index flag or one
per line on stdin. Text is scanned the way ``scanf("%x")`` reads it (optional
leading whitespace, optional ``0x`` prefix, longest run of hex digits) and the
resulting value is checked against the h3 library before use.

Decoding never raises on bad data. It returns an explicit result instead:

    >>> decode_cell("8928308280fffff")
    Decoded(cell=617700169958293503, source='8928308280fffff')
    >>> decode_cell("not a cell")
    Invalid(source='not a cell', reason='no hexadecimal digits')
"""

from __future__ import annotations

import re
from dataclasses import dataclass

import h3

from h3_filters.core.constants import MAX_CELL_INDEX

_HEX_PREFIX = re.compile(r"\s*(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Cell center point in degrees."""

    lat: float
    lng: float


@dataclass(frozen=True, slots=True)
class Decoded:
    """Text that decoded to a valid H3 cell."""

    cell: int
    source: str


@dataclass(frozen=True, slots=True)
class Invalid:
    """Text that could not be decoded to a valid H3 cell."""

    source: str
    reason: str


DecodeResult = Decoded | Invalid


def parse_hex_index(text: str) -> int | None:
    """
    Scan a hexadecimal index from the start of ``text``.

    Args:
        text: Text beginning with a hexadecimal number

    Returns:
        The scanned value, or None if no hex digits were found or the value
        does not fit in 64 bits
    """
    match = _HEX_PREFIX.match(text)
    if match is None:
        return None
    value = int(match.group(1), 16)
    if value > MAX_CELL_INDEX:
        return None
    return value


def validate_cell(value: int, source: str | None = None) -> DecodeResult:
    """
    Check a scanned index against the h3 library.

    Args:
        value: Scanned 64-bit index
        source: Original text, used for diagnostics (defaults to the hex form)

    Returns:
        Decoded for a valid cell, Invalid otherwise
    """
    if source is None:
        source = cell_to_string(value)
    if not h3.is_valid_cell(h3.int_to_str(value)):
        return Invalid(source=source, reason="not a valid H3 cell")
    return Decoded(cell=value, source=source)


def decode_cell(text: str) -> DecodeResult:
    """Decode one line of text into a cell index."""
    source = text.strip()
    value = parse_hex_index(text)
    if value is None:
        if _HEX_PREFIX.match(text) is None:
            return Invalid(source=source, reason="no hexadecimal digits")
        return Invalid(source=source, reason="value does not fit in 64 bits")
    return validate_cell(value, source)


def cell_to_string(cell: int) -> str:
    """Render a cell index in its canonical lower-case hexadecimal form."""
    return h3.int_to_str(cell)


def cell_to_coordinate(cell: int) -> Coordinate:
    """Return the center point of a cell in degrees."""
    lat, lng = h3.cell_to_latlng(h3.int_to_str(cell))
    return Coordinate(lat=lat, lng=lng)
