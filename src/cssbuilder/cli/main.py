"""cssbuilder CLI entry point: Click group with subcommands."""

import logging

import click

from cssbuilder import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cssbuilder")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """cssbuilder - build CSS selectors from ordered parts."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from cssbuilder.cli.build import build  # noqa: E402
from cssbuilder.cli.shapes import area, rect  # noqa: E402

cli.add_command(build)
cli.add_command(area)
cli.add_command(rect)
