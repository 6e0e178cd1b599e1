"""Default loading functions for Python scripts and modules."""

import hashlib
import importlib
import importlib.util
import sys
from collections.abc import Callable
from functools import partial
from pathlib import Path
from types import ModuleType

from scriptloader.location import SCRIPT_SUFFIX, ScriptLocation
from scriptloader.log import get_logger

logger = get_logger(__name__)


def _module_name_for(script_file: Path) -> str:
    # Unique per file, so scripts with the same name do not collide
    digest = hashlib.sha1(str(script_file).encode(), usedforsecurity=False)
    return f"scriptloader_{script_file.stem}_{digest.hexdigest()[:12]}"


def import_script_file(
    identifier: str,
    search_paths: list[Path] | None = None,
) -> ModuleType:
    """Import a Python source file.

    Args:
        identifier: Path of the script, with or without the ``.py`` suffix
        search_paths: Directories to look up relative paths in

    Returns:
        The imported module

    Raises:
        FileNotFoundError: If the script does not exist
        ImportError: If the module spec cannot be created

    """
    script_file = ScriptLocation(identifier).resolve(search_paths)
    if not script_file.exists() or not script_file.is_file():
        msg = f"Script not found: {script_file}"
        raise FileNotFoundError(msg)

    module_name = _module_name_for(script_file)
    spec = importlib.util.spec_from_file_location(module_name, script_file)
    if spec is None or spec.loader is None:
        msg = f"Could not create module spec for {script_file}"
        raise ImportError(msg)

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        sys.modules.pop(module_name, None)
        raise

    logger.debug("Imported %s as %s", script_file, module_name)
    return module


def import_module_name(identifier: str) -> ModuleType:
    """Import a module by its dotted name."""
    return importlib.import_module(identifier.strip())


def _is_file_identifier(identifier: str) -> bool:
    return identifier.strip().endswith(SCRIPT_SUFFIX) or "/" in identifier or "\\" in identifier


def default_load_function(
    identifier: str,
    search_paths: list[Path] | None = None,
) -> ModuleType:
    """Import a script file or a module depending on the identifier form.

    Identifiers ending with ``.py`` or containing a path separator are
    treated as files, anything else as a dotted module name.
    """
    if _is_file_identifier(identifier):
        return import_script_file(identifier, search_paths)
    return import_module_name(identifier)


def make_load_function(
    search_paths: list[Path] | None = None,
) -> Callable[[str], ModuleType]:
    """Get the default loading function bound to the given search paths."""
    return partial(default_load_function, search_paths=search_paths)
