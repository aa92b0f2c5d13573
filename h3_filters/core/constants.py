"""
Shared constants for h3-filters.

This module defines constants that are shared across multiple modules to ensure
consistency and make it easy to change values in one place.
"""

# Longest text value accepted for a flag or an input line (one byte short of
# the 256-byte buffers the filters have always used)
MAX_TEXT_LENGTH = 255

# KML document defaults used when --kml-name / --kml-description are absent
DEFAULT_KML_NAME = "geo from H3"
DEFAULT_KML_DESCRIPTION = "from h3ToGeo"

KML_NAMESPACE = "http://earth.google.com/kml/2.1"

# Fractional digits for plain-text coordinates
PLAIN_TEXT_PRECISION = 10

# Largest value representable by a 64-bit cell index
MAX_CELL_INDEX = 2**64 - 1
