"""
Point sinks: the output formats of h3ToGeo.

A sink is chosen once per run and receives every converted cell in input
order. Sinks are context managers; entering writes any document header and
leaving writes the matching footer, on error paths as well:

    with make_sink(options, sys.stdout) as sink:
        for cell in cells:
            sink.write_point(cell, cell_to_coordinate(cell))

Formats:
- plain text: ``"<lat> <lng>"`` per line, degrees with 10 decimals
- KML: one Placemark per point inside a single Folder document
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO

from lxml import etree

from h3_filters.core.cells import Coordinate, cell_to_string
from h3_filters.core.config import FilterOptions, KmlDocumentMetadata, OutputMode
from h3_filters.core.constants import KML_NAMESPACE, PLAIN_TEXT_PRECISION

if TYPE_CHECKING:
    from types import TracebackType


class PointSink(ABC):
    """Base class for output formats."""

    def __init__(self, output: TextIO):
        self.output = output
        self.count = 0

    def open(self) -> None:
        """Write anything that must precede the first point."""

    def close(self) -> None:
        """Write anything that must follow the last point."""

    @abstractmethod
    def _format_point(self, cell: int, coord: Coordinate) -> str: ...

    def write_point(self, cell: int, coord: Coordinate) -> None:
        self.output.write(self._format_point(cell, coord))
        self.count += 1

    def __enter__(self) -> PointSink:
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()
        self.output.flush()


class PlainTextSink(PointSink):
    """One ``lat lng`` line per point."""

    def _format_point(self, cell: int, coord: Coordinate) -> str:
        p = PLAIN_TEXT_PRECISION
        return f"{coord.lat:.{p}f} {coord.lng:.{p}f}\n"


# Characters outside the XML 1.0 Char production
_NON_XML_CHARS = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def find_non_xml_char(text: str) -> str | None:
    """Return the first character XML text content cannot hold, or None."""
    match = _NON_XML_CHARS.search(text)
    return match.group(0) if match else None


def _text_element(tag: str, text: str) -> str:
    """Serialize a single element with escaped text content."""
    element = etree.Element(tag)
    element.text = text
    return etree.tostring(element, encoding="unicode")


class KmlSink(PointSink):
    """
    KML point placemark document.

    The header is written by open() and the footer by close(), each exactly
    once, so the document stays well formed whether zero or many points are
    written between them.
    """

    def __init__(self, output: TextIO, metadata: KmlDocumentMetadata | None = None):
        super().__init__(output)
        self.metadata = metadata or KmlDocumentMetadata()
        self._opened = False
        self._closed = False

    def header(self) -> str:
        return (
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            f'<kml xmlns="{KML_NAMESPACE}">\n'
            "<Folder>\n"
            '<Style id="lineStyle1">'
            "<LineStyle><color>ff0000ff</color><width>2</width></LineStyle>"
            "</Style>\n"
            f"{_text_element('name', self.metadata.name)}\n"
            f"{_text_element('description', self.metadata.description)}\n"
        )

    @staticmethod
    def footer() -> str:
        return "</Folder>\n</kml>\n"

    def open(self) -> None:
        if self._opened:
            return
        self.output.write(self.header())
        self._opened = True

    def close(self) -> None:
        if not self._opened or self._closed:
            return
        self.output.write(self.footer())
        self._closed = True

    def _format_point(self, cell: int, coord: Coordinate) -> str:
        placemark = etree.Element("Placemark")
        etree.SubElement(placemark, "name").text = cell_to_string(cell)
        etree.SubElement(placemark, "styleUrl").text = "#m_ylw-pushpin"
        point = etree.SubElement(placemark, "Point")
        etree.SubElement(point, "altitudeMode").text = "relativeToGround"
        etree.SubElement(point, "coordinates").text = f"{coord.lng:.8f},{coord.lat:.8f},5.0"
        return etree.tostring(placemark, encoding="unicode", pretty_print=True)


def make_sink(options: FilterOptions, output: TextIO) -> PointSink:
    """
    Create the sink for the configured output mode.

    Args:
        options: Filter options selecting the output mode
        output: Text stream to write to

    Returns:
        An unopened PointSink
    """
    if options.output_mode is OutputMode.KML:
        return KmlSink(output, options.kml)
    return PlainTextSink(output)
