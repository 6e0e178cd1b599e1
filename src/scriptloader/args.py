"""Parse and organize command line args."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import typed_argparse as tap


class Args(tap.TypedArgs):
    """Command line args."""

    script: str | None = tap.arg(
        positional=True,
        nargs="?",
        help="Script path or dotted module name",
        default=None,
    )
    member: str | None = tap.arg(
        positional=True,
        nargs="?",
        help="Function, class or object to use",
        default=None,
    )
    params: list[str] = tap.arg(
        positional=True,
        nargs="*",
        help="Arguments, parsed as JSON literals when possible",
        default=[],
    )
    new: bool = tap.arg(help="Instantiate the member class", default=False)
    method: str | None = tap.arg(
        help="Call this method on the member object",
        default=None,
    )
    get: bool = tap.arg(help="Print the member value instead of calling it", default=False)
    safe: bool = tap.arg(
        help="Fail if the argument count differs from the declared parameters",
        default=False,
    )
    list_members: bool = tap.arg(help="List the script members", default=False)
    path: Path | None = tap.arg(help="Working directory", default=None)
    timeout: float | None = tap.arg(help="Seconds to wait for the script to load", default=None)
    verbose: bool = tap.arg(help="Enables verbose (DEBUG) logging", default=False)
    version: bool = tap.arg(help="Show version and exit", default=False)

    @property
    def parsed_params(self) -> list[Any]:
        """Get call arguments, decoding JSON literals.

        Arguments that are not valid JSON are passed as plain strings.
        """
        parsed: list[Any] = []
        for raw in self.params:
            try:
                parsed.append(json.loads(raw))
            except json.JSONDecodeError:
                parsed.append(raw)
        return parsed

    @property
    def working_dir(self) -> Path:
        """Get working directory."""
        if self.path:
            work_dir = self.path
            if not work_dir.is_absolute():
                work_dir = Path.cwd().joinpath(work_dir).resolve()
        else:
            work_dir = Path.cwd().resolve()

        if not work_dir.is_dir():
            msg = (
                f"Specified path '{self.path}' resolved to '{work_dir}' which is "
                "not a valid directory."
            )
            raise ValueError(msg)

        return work_dir


def bind_and_run(app_main: Callable[[Args], None]) -> None:
    """Parse args and run the app passing the parsed args."""
    tap.Parser(Args).bind(app_main).run()
