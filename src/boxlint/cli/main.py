"""boxlint CLI entry point: Click group with subcommands."""

import logging

import click

from boxlint import __version__


@click.group()
@click.version_option(version=__version__, prog_name="boxlint")
@click.option("--verbose", "-v", is_flag=True, help="Log analysis details to stderr.")
def cli(verbose: bool) -> None:
    """boxlint - responsive-layout linter for CSS with ASCII diagrams."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from boxlint.cli.check import check  # noqa: E402
from boxlint.cli.diagram import diagram, types  # noqa: E402

cli.add_command(check)
cli.add_command(diagram)
cli.add_command(types)
