"""CLI entry point for grayline."""

import click


from .terminator import terminator
from .sun import sun
from . import common as common
from ..logging import get_logger


# Create a logger for this module
logger = get_logger(__name__)


@click.group()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times: -v, -vv, -vvv)",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging (equivalent to -vv)",
)
@click.option(
    "--quiet",
    is_flag=True,
    help="Suppress all logging except errors",
)
def cli(verbose: int, debug: bool, quiet: bool) -> None:
    """Grayline: day/night terminator CLI."""
    common.configure_logging(
        {
            "quiet": quiet,
            "debug": debug,
            "verbose": verbose,
        }
    )
    logger.debug("Debug logging enabled")


cli.add_command(terminator)
cli.add_command(sun)
if __name__ == "__main__":
    cli()
