"""Installed version lookup for the scriptloader CLI."""

import sys
from importlib.metadata import PackageNotFoundError, version

from rich.console import Console

DISTRIBUTION = "scriptloader"


def get_scriptloader_version() -> str | None:
    """Get the installed distribution version, None when running from a checkout."""
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        return None


def show_version(console: Console | None = None) -> None:
    """Print the version line and exit with status 0."""
    console = console or Console()
    installed = get_scriptloader_version()
    if installed is None:
        console.print(f"{DISTRIBUTION} [dim](not installed)[/dim]")
    else:
        console.print(f"{DISTRIBUTION} [bold]{installed}[/bold]")
    sys.exit(0)
