"""Script locations made of a script name and nested module directories."""

from dataclasses import dataclass
from pathlib import Path

from scriptloader.errors import IdentifierRequiredError

SCRIPT_SUFFIX = ".py"


@dataclass(frozen=True)
class ScriptLocation:
    """Location of a script inside nested module directories.

    Attributes:
        script_name: File name of the script, always ending with ``.py``
        modules: Nested module directories, outermost first

    """

    script_name: str
    modules: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Normalize the script name."""
        script_name = (self.script_name or "").strip()
        if not script_name:
            raise IdentifierRequiredError
        if not script_name.endswith(SCRIPT_SUFFIX):
            script_name += SCRIPT_SUFFIX
        object.__setattr__(self, "script_name", script_name)
        object.__setattr__(
            self,
            "modules",
            tuple(m.strip("/") for m in self.modules if m and m.strip("/")),
        )

    @classmethod
    def of(cls, script_name: str, *modules: str) -> "ScriptLocation":
        """Create a location from a script name and nested modules."""
        return cls(script_name, tuple(modules))

    @property
    def full_path(self) -> str:
        """Get the modules and the script name joined with ``/``."""
        return "/".join([*self.modules, self.script_name])

    @property
    def has_nested_module(self) -> bool:
        """Check if the script lives inside at least one nested module."""
        return bool(self.modules)

    @property
    def nested_module(self) -> str | None:
        """Get the outermost nested module, or None."""
        return self.modules[0] if self.modules else None

    def without_nested_module(self) -> "ScriptLocation":
        """Get a location with the outermost nested module removed."""
        return ScriptLocation(self.script_name, self.modules[1:])

    def resolve(self, search_paths: list[Path] | None = None) -> Path:
        """Get the script file path.

        Relative locations are looked up in ``search_paths`` first, then in
        the current working directory.
        """
        path = Path(self.full_path).expanduser()
        if path.is_absolute():
            return path
        for base in search_paths or []:
            candidate = base / path
            if candidate.is_file():
                return candidate.resolve()
        return (Path.cwd() / path).resolve()

    def __str__(self) -> str:
        return self.full_path
