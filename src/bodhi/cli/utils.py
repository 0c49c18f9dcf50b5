"""
Bodhi CLI utilities.

Shared helpers used across CLI modules.
"""

import logging
import os
import platform

import typer
from rich.console import Console

from bodhi._version import get_version

console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"bodhi {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging; BODHI_LOG_LEVEL sets the level unless verbose."""
    if verbose:
        level = logging.DEBUG
    else:
        name = os.getenv("BODHI_LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, name, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("bodhi").setLevel(level)
