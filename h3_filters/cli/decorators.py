"""
Shared Click decorators and parameter types for the filter commands.

Filters share their output and diagnostics flags; keeping them here keeps the
names, aliases and help text identical across commands.
"""

import click

from h3_filters.core.cells import parse_hex_index
from h3_filters.core.config import truncate_text
from h3_filters.core.constants import MAX_TEXT_LENGTH
from h3_filters.core.point_sinks import find_non_xml_char


class H3IndexType(click.ParamType):
    """Hexadecimal 64-bit cell index, scanned like ``%x``."""

    name = "index"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        parsed = parse_hex_index(value)
        if parsed is None:
            self.fail(f"{value!r} is not a hexadecimal 64-bit index", param, ctx)
        return parsed


H3_INDEX = H3IndexType()


def _bounded_text(ctx, param, value):
    """Option callback capping text at MAX_TEXT_LENGTH characters.

    Text is written into the KML header, so characters XML cannot hold are
    rejected as a usage error.
    """
    value = truncate_text(value)
    if value is not None:
        bad = find_non_xml_char(value)
        if bad is not None:
            raise click.BadParameter(
                f"contains character U+{ord(bad):04X}, which is not allowed in KML text"
            )
    return value


def index_option(func):
    """
    Add --index/-i option to a command.

    When supplied, the command converts this single index and ignores stdin.
    """
    return click.option(
        "-i",
        "--index",
        "index",
        type=H3_INDEX,
        metavar="INDEX",
        help="Index, or not specified to read indexes from standard in.",
    )(func)


def kml_options(func):
    """
    Add KML output options to a command.

    Adds:
    - --kml/-k: Print output in KML format
    - --kml-name/--kn: Name in the KML header
    - --kml-description/--kd: Description in the KML header
    """
    func = click.option(
        "--kd",
        "--kml-description",
        "kml_description",
        metavar="DESCRIPTION",
        callback=_bounded_text,
        help=f"Description of the KML file (up to {MAX_TEXT_LENGTH} characters).",
    )(func)
    func = click.option(
        "--kn",
        "--kml-name",
        "kml_name",
        metavar="NAME",
        callback=_bounded_text,
        help=f"Name of the KML file (up to {MAX_TEXT_LENGTH} characters).",
    )(func)
    func = click.option(
        "-k",
        "--kml",
        "kml",
        is_flag=True,
        help="Print output in KML format.",
    )(func)
    return func


def verbose_option(func):
    """
    Add --verbose/-v option to a command.

    Enables debug diagnostics on stderr.
    """
    return click.option("--verbose", "-v", is_flag=True, help="Print verbose output")(func)
