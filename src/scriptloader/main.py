"""scriptloader CLI entry point."""

import asyncio
import sys
from typing import Any

from rich.console import Console
from rich.pretty import Pretty
from rich.table import Table

from scriptloader.args import Args, bind_and_run
from scriptloader.config import load_settings
from scriptloader.errors import ScriptLoaderError
from scriptloader.log import get_logger, init_logging
from scriptloader.resource import LoadedResource
from scriptloader.script import Script
from scriptloader.version import show_version


def render_members(resource: LoadedResource, console: Console) -> None:
    """Render the members of a loaded script as a table."""
    if not resource:
        console.print("[yellow]No members found.[/yellow]")
        return

    table = Table(
        show_header=True,
        header_style="bold cyan",
        show_edge=False,
        show_lines=False,
        box=None,
    )
    table.add_column("Name", style="green")
    table.add_column("Kind", justify="center")

    for name, kind in sorted(resource.kinds().items()):
        table.add_row(name, kind.value)

    console.print(table)


async def execute(script: Script, args: Args, timeout: float | None) -> Any:
    """Perform the operation selected by the args on the script."""
    resource = await script.loaded_script(timeout)
    if args.list_members:
        return resource

    if not args.member:
        msg = "A member name is required unless --list-members is given"
        raise ValueError(msg)

    call_args = args.parsed_params
    if args.get:
        return await script.get_object(args.member)
    if args.method:
        if args.safe:
            return await script.safe_call_object_method(args.member, args.method, *call_args)
        return await script.call_object_method(args.member, args.method, *call_args)
    if args.new:
        if args.safe:
            return await script.safe_call_new(args.member, *call_args)
        return await script.call_new(args.member, *call_args)
    if args.safe:
        return await script.safe_call_function(args.member, *call_args)
    return await script.call_function(args.member, *call_args)


def run(args: Args) -> None:
    """Load the script and run the requested operation."""
    console = Console()
    if args.version:
        show_version(console)

    init_logging(verbose=args.verbose)
    logger = get_logger(__name__)

    if not args.script:
        console.print("[red]A script path or module name is required.[/red]")
        sys.exit(2)

    settings = load_settings(args.working_dir, load_timeout=args.timeout)
    script = Script.from_settings(args.script, settings)

    try:
        result = asyncio.run(execute(script, args, settings.load_timeout))
    except (ScriptLoaderError, ValueError) as err:
        logger.debug("Operation failed on %s", script.identifier, exc_info=True)
        console.print(f"[red]{err}[/red]")
        sys.exit(1)
    except TimeoutError:
        console.print(f"[red]Timed out loading {script.identifier}[/red]")
        sys.exit(1)

    if isinstance(result, LoadedResource):
        render_members(result, console)
    else:
        console.print(Pretty(result))


def main() -> None:
    """Entry point for the CLI."""
    bind_and_run(run)


if __name__ == "__main__":
    main()
