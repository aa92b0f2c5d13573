"""
Pytest configuration and shared fixtures for h3-filters tests.
"""

import io

import pytest

from h3_filters.core.config import FilterOptions

# Known-valid cells at a few resolutions
SF_CELL = "8928308280fffff"
RES5_CELL = "85283473fffffff"
RES0_CELL = "8029fffffffffff"
VALID_CELLS = [SF_CELL, RES5_CELL, RES0_CELL]

# Plain-text output line: "<lat> <lng>" with exactly 10 decimals each
PLAIN_LINE_PATTERN = r"^-?\d+\.\d{10} -?\d+\.\d{10}$"


@pytest.fixture
def plain_options():
    """Return options for plain-text streaming mode."""
    return FilterOptions.from_params()


@pytest.fixture
def kml_options():
    """Return options for KML streaming mode with default metadata."""
    return FilterOptions.from_params(kml=True)


@pytest.fixture
def output_stream():
    """Return an in-memory text stream to capture filter output."""
    return io.StringIO()


def stdin_of(*lines):
    """
    Build an in-memory stdin holding one index per line.

    Args:
        *lines: Lines without trailing newlines

    Returns:
        io.StringIO positioned at the start
    """
    return io.StringIO("".join(f"{line}\n" for line in lines))


def failing_stream(*lines, exc=None):
    """
    Yield the given lines, then fail the way a broken stdin does.

    Args:
        *lines: Lines to yield before failing
        exc: Exception to raise (default: OSError)
    """
    for line in lines:
        yield f"{line}\n"
    raise exc or OSError("Input/output error")
