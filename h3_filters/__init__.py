from h3_filters.cli.main import __version__, cli, main
from h3_filters.core.cells import (
    Coordinate,
    Decoded,
    Invalid,
    cell_to_coordinate,
    cell_to_string,
    decode_cell,
)
from h3_filters.core.config import FilterOptions, KmlDocumentMetadata, OutputMode
from h3_filters.core.h3_to_geo import FilterReadError, FilterSummary, h3_to_geo
from h3_filters.core.point_sinks import KmlSink, PlainTextSink, PointSink, make_sink

__all__ = [
    "__version__",
    "cli",
    "main",
    # Filter
    "h3_to_geo",
    "FilterOptions",
    "FilterSummary",
    "FilterReadError",
    "OutputMode",
    "KmlDocumentMetadata",
    # Cells
    "Coordinate",
    "Decoded",
    "Invalid",
    "decode_cell",
    "cell_to_coordinate",
    "cell_to_string",
    # Output
    "PointSink",
    "PlainTextSink",
    "KmlSink",
    "make_sink",
]
