#!/usr/bin/env python3
"""
stdin/stdout filter converting H3 cell indexes to cell center points.

Reads one hexadecimal index per line until end of input (or takes a single
index from --index) and writes each cell's center as plain text or KML:

    h3ToGeo < indexes.txt
    h3ToGeo --kml --kml-name "kml file" --kml-description "h3 cells" < indexes.txt > cells.kml
"""

from __future__ import annotations

import io
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO

from h3_filters.core.cells import (
    Decoded,
    DecodeResult,
    cell_to_coordinate,
    decode_cell,
    validate_cell,
)
from h3_filters.core.config import FilterOptions, truncate_text
from h3_filters.core.logging_config import debug, warn
from h3_filters.core.point_sinks import PointSink, make_sink


class FilterReadError(Exception):
    """Error raised when the input stream fails for a reason other than EOF."""

    pass


@dataclass(slots=True)
class FilterSummary:
    """Counts collected over one filter run."""

    points: int = 0
    skipped: int = 0


def iter_input_lines(stream: TextIO) -> Iterator[tuple[int, str]]:
    """
    Yield ``(line_number, text)`` for each line of the stream.

    Line endings are removed and each line is cut to MAX_TEXT_LENGTH
    characters. Bytes that are not valid in the stream encoding are replaced
    with U+FFFD, so a bad line decodes to an invalid index instead of ending
    the run.

    Raises:
        FilterReadError: If reading fails before end of input
    """
    if isinstance(stream, io.TextIOWrapper):
        stream.reconfigure(errors="replace")
    lines = iter(stream)
    line_number = 0
    while True:
        try:
            line = next(lines)
        except StopIteration:
            return
        except OSError as e:
            raise FilterReadError(f"reading H3 index from stdin: {e}") from e
        line_number += 1
        yield line_number, truncate_text(line.rstrip("\r\n"))


def _emit(result: DecodeResult, sink: PointSink, summary: FilterSummary, where: str) -> None:
    if isinstance(result, Decoded):
        sink.write_point(result.cell, cell_to_coordinate(result.cell))
        summary.points += 1
    else:
        warn(f"Skipping {where}: {result.source!r} ({result.reason})")
        summary.skipped += 1


def h3_to_geo(
    options: FilterOptions,
    input_stream: TextIO | None = None,
    output_stream: TextIO | None = None,
) -> FilterSummary:
    """
    Convert cell indexes to center points.

    In single-value mode (``options.index`` set) the input stream is never
    read. Otherwise every line is decoded and converted in order. Lines that
    do not hold a valid cell are reported with a warning and skipped; blank
    lines are skipped silently.

    Args:
        options: Filter options
        input_stream: Stream of indexes (default: sys.stdin)
        output_stream: Stream for results (default: sys.stdout)

    Returns:
        FilterSummary with the number of points written and inputs skipped

    Raises:
        FilterReadError: If the input stream fails. The KML footer has
            already been written when this propagates.
    """
    output = output_stream if output_stream is not None else sys.stdout
    summary = FilterSummary()

    debug(f"Output format: {options.output_mode.value}")

    with make_sink(options, output) as sink:
        if options.single_value:
            debug("Converting single index from --index")
            _emit(validate_cell(options.index), sink, summary, "--index value")
        else:
            source = input_stream if input_stream is not None else sys.stdin
            debug("Reading indexes from stdin...")
            for line_number, text in iter_input_lines(source):
                if not text.strip():
                    debug(f"Skipping blank line {line_number}")
                    continue
                _emit(decode_cell(text), sink, summary, f"line {line_number}")

    debug(f"Wrote {summary.points} point(s), skipped {summary.skipped} input(s)")
    return summary
