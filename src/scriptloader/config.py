"""Configuration loader for scriptloader."""

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from scriptloader.log import get_logger

logger = get_logger(__name__)

CONFIG_DIR_NAME = ".scriptloader"
CONFIG_FILE_NAME = "config.toml"

_ENV_OVERRIDES = {
    "poison_on_failure": "SCRIPTLOADER_POISON_ON_FAILURE",
    "load_timeout": "SCRIPTLOADER_LOAD_TIMEOUT",
}


class LoaderSettings(BaseModel):
    """Settings applied to scripts created by the command line tool."""

    poison_on_failure: bool = False
    load_timeout: float | None = None
    search_paths: list[Path] = Field(default_factory=list)

    @field_validator("load_timeout")
    @classmethod
    def check_timeout(cls, v: float | None) -> float | None:
        """Ensure the timeout is positive when set."""
        if v is not None and v <= 0:
            msg = f"load_timeout must be positive, got {v}"
            raise ValueError(msg)
        return v

    @field_validator("search_paths", mode="before")
    @classmethod
    def expand_search_paths(cls, v: object) -> object:
        """Expand ``~`` in search paths."""
        if isinstance(v, str):
            v = [v]
        if isinstance(v, list):
            return [Path(p).expanduser() if isinstance(p, str | Path) else p for p in v]
        return v


def _read_config_file(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        return {}
    try:
        with config_path.open("rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.debug("Failed to load config %s: %s", config_path, e)
        return {}


def _relative_to(base: Path, values: dict[str, Any]) -> dict[str, Any]:
    paths = values.get("search_paths")
    if isinstance(paths, str):
        paths = [paths]
    if isinstance(paths, list):
        values["search_paths"] = [
            str(base / Path(p).expanduser()) if isinstance(p, str) else p
            for p in paths
        ]
    return values


def load_settings(
    working_dir: Path | None = None,
    env: Mapping[str, str] | None = None,
    **overrides: Any,
) -> LoaderSettings:
    """Load settings with priority: overrides > env > local > global.

    Args:
        working_dir: Directory holding the local ``.scriptloader/config.toml``,
            defaults to the current working directory
        env: Environment to read overrides from, defaults to ``os.environ``
        **overrides: Explicit values, None values are ignored

    Returns:
        The merged settings

    """
    work_dir = working_dir or Path.cwd()
    env_map = os.environ if env is None else env

    merged: dict[str, Any] = {}

    # Priority 4: Global configuration
    global_dir = Path.home()
    merged.update(
        _relative_to(
            global_dir,
            _read_config_file(global_dir / CONFIG_DIR_NAME / CONFIG_FILE_NAME),
        ),
    )

    # Priority 3: Local configuration
    merged.update(
        _relative_to(
            work_dir,
            _read_config_file(work_dir / CONFIG_DIR_NAME / CONFIG_FILE_NAME),
        ),
    )

    # Priority 2: Environment
    for field, env_var in _ENV_OVERRIDES.items():
        if env_map.get(env_var):
            merged[field] = env_map[env_var]

    # Priority 1: Explicit values
    merged.update({k: v for k, v in overrides.items() if v is not None})

    known = {k: v for k, v in merged.items() if k in LoaderSettings.model_fields}
    return LoaderSettings.model_validate(known)
