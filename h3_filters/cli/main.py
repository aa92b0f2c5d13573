"""
The h3ToGeo command: click definition, argument parsing and console entry point.
"""

import sys
from dataclasses import dataclass
from enum import Enum

import click

from h3_filters.cli.decorators import index_option, kml_options, verbose_option
from h3_filters.core.config import FilterOptions
from h3_filters.core.h3_to_geo import FilterReadError
from h3_filters.core.h3_to_geo import h3_to_geo as h3_to_geo_impl
from h3_filters.core.logging_config import configure_verbose

# Version info
__version__ = "0.1.0"

PROG_NAME = "h3ToGeo"

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


class ParseStatus(Enum):
    """How argument parsing ended."""

    HELP = "help"
    ERROR = "error"
    SUCCESS = "success"


@dataclass(frozen=True)
class ParseOutcome:
    """Result of parse_args: a status, the options on success, and the exit code."""

    status: ParseStatus
    options: FilterOptions | None = None
    exit_code: int = 0


def run_filter(options, input_stream=None, output_stream=None):
    """Run the filter, turning read failures into a ClickException."""
    configure_verbose(options.verbose)
    try:
        return h3_to_geo_impl(options, input_stream=input_stream, output_stream=output_stream)
    except FilterReadError as e:
        raise click.ClickException(str(e)) from e


@click.command(name=PROG_NAME, context_settings=CONTEXT_SETTINGS)
@index_option
@kml_options
@verbose_option
@click.version_option(version=__version__, prog_name="h3-filters")
def cli(index, kml, kml_name, kml_description, verbose):
    """
    Converts indexes to latitude/longitude center coordinates in degrees.

    Reads H3 indexes (hexadecimal, one per line) from standard in until end of
    input and prints each cell's center point, or converts the single index
    given with --index.

    Examples:

      \b
      # Plain text center points
      h3ToGeo < indexes.txt

      \b
      # KML document with a custom name and description
      h3ToGeo --kml --kml-name "kml file" --kml-description "h3 cells" \\
        < indexes.txt > cells.kml

      \b
      # A single cell
      h3ToGeo --index 8928308280fffff
    """
    options = FilterOptions.from_params(
        index=index,
        kml=kml,
        kml_name=kml_name,
        kml_description=kml_description,
        verbose=verbose,
    )
    run_filter(options)


def parse_args(argv=None):
    """
    Parse command-line arguments without running the filter.

    Help and version output are printed here, as are usage errors.

    Args:
        argv: Argument list (default: sys.argv[1:])

    Returns:
        ParseOutcome with status HELP (exit 0), ERROR (click's usage exit
        code) or SUCCESS (options set)
    """
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        with cli.make_context(PROG_NAME, args) as ctx:
            options = FilterOptions.from_params(**ctx.params)
    except click.exceptions.Exit as e:
        return ParseOutcome(ParseStatus.HELP, exit_code=e.exit_code)
    except click.ClickException as e:
        e.show()
        return ParseOutcome(ParseStatus.ERROR, exit_code=e.exit_code)
    return ParseOutcome(ParseStatus.SUCCESS, options=options)


def main(argv=None):
    """Console entry point for h3ToGeo; returns the process exit status."""
    outcome = parse_args(argv)
    if outcome.status is not ParseStatus.SUCCESS:
        return outcome.exit_code

    try:
        run_filter(outcome.options)
    except click.ClickException as e:
        e.show()
        return e.exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())
