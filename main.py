# --- main.py ---

import logging
import signal
import sys
from typing import Optional

import click

# --- Project Imports ---
from config import settings
from errors import SearchError
from scanner import Search
from signals import DepthBumper, install_interrupt_handler
import filters

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    """Configure logging for CLI usage."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
        force=True,
    )


@click.command()
@click.argument("path", default=".", type=click.Path())
@click.option("--pattern", "-p", default=settings.PATTERN, show_default=True,
              help="Substring to look for in file names (case-sensitive).")
@click.option("--max-depth", type=click.IntRange(min=0), default=None,
              help=f"Deepest file level to collect [default: {settings.MAX_DEPTH}].")
@click.option("--timeout", type=click.FloatRange(min=0), default=None,
              help=f"Time budget for the walk in seconds [default: {settings.TIMEOUT}].")
@click.option("--verbose", "-v", is_flag=True, help="Log every directory entered.")
def main(path: str, pattern: str, max_depth: Optional[int], timeout: Optional[float], verbose: bool):
    """
    Search PATH for files whose name contains a pattern.

    Press Ctrl+C once during the walk to raise the depth limit.
    """
    _setup_logging(verbose)

    try:
        search = Search(
            path,
            max_depth=max_depth,
            timeout=timeout,
            on_progress=lambda p: logger.debug("Scanning: %s", p)
        )
    except SearchError as e:
        logger.error("%s", e)
        sys.exit(1)

    bumper = DepthBumper(search.increase_depth)
    previous_handler = install_interrupt_handler(bumper)
    bumper.start()

    try:
        search.start()
    except SearchError as e:
        logger.error("%s", e)
        sys.exit(1)
    finally:
        bumper.stop()
        bumper.join()
        signal.signal(signal.SIGINT, previous_handler)

    if search.stats.deadline_hit:
        logger.info("Results are partial: the walk ran out of time")

    result = search.find(pattern)
    for line in filters.format_match_report(result):
        click.echo(line)


# --- Entry Point ---
if __name__ == "__main__":
    main()
