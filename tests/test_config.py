"""Tests for configuration loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from scriptloader.config import LoaderSettings, load_settings


@pytest.fixture
def home_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    work = tmp_path / "work"
    work.mkdir()
    return work


def write_config(base: Path, content: str) -> None:
    config_dir = base / ".scriptloader"
    config_dir.mkdir()
    (config_dir / "config.toml").write_text(content)


class TestLoaderSettings:
    """Test settings validation."""

    def test_defaults(self) -> None:
        settings = LoaderSettings()

        assert settings.poison_on_failure is False
        assert settings.load_timeout is None
        assert settings.search_paths == []

    @pytest.mark.parametrize("timeout", [0, -1.5])
    def test_timeout_must_be_positive(self, timeout: float) -> None:
        with pytest.raises(ValidationError, match="load_timeout must be positive"):
            LoaderSettings(load_timeout=timeout)

    def test_search_paths_expand_user(self, home_dir: Path) -> None:
        settings = LoaderSettings(search_paths="~/scripts")

        assert settings.search_paths == [home_dir / "scripts"]


class TestLoadSettings:
    """Test precedence of configuration sources."""

    def test_no_config_files(self, home_dir: Path, work_dir: Path) -> None:
        assert load_settings(work_dir, env={}) == LoaderSettings()

    def test_global_config(self, home_dir: Path, work_dir: Path) -> None:
        write_config(home_dir, 'poison_on_failure = true\nsearch_paths = ["scripts"]\n')

        settings = load_settings(work_dir, env={})

        assert settings.poison_on_failure is True
        assert settings.search_paths == [home_dir / "scripts"]

    def test_local_overrides_global(self, home_dir: Path, work_dir: Path) -> None:
        write_config(home_dir, "load_timeout = 10.0\npoison_on_failure = true\n")
        write_config(work_dir, "load_timeout = 2.5\n")

        settings = load_settings(work_dir, env={})

        assert settings.load_timeout == 2.5
        assert settings.poison_on_failure is True

    def test_env_overrides_files(self, home_dir: Path, work_dir: Path) -> None:
        write_config(work_dir, "load_timeout = 2.5\n")

        settings = load_settings(
            work_dir,
            env={
                "SCRIPTLOADER_LOAD_TIMEOUT": "7",
                "SCRIPTLOADER_POISON_ON_FAILURE": "yes",
            },
        )

        assert settings.load_timeout == 7.0
        assert settings.poison_on_failure is True

    def test_explicit_values_win(self, home_dir: Path, work_dir: Path) -> None:
        settings = load_settings(
            work_dir,
            env={"SCRIPTLOADER_LOAD_TIMEOUT": "7"},
            load_timeout=1.0,
            poison_on_failure=None,
        )

        assert settings.load_timeout == 1.0
        assert settings.poison_on_failure is False

    def test_invalid_toml_is_skipped(self, home_dir: Path, work_dir: Path) -> None:
        write_config(work_dir, "load_timeout = = 1\n")

        assert load_settings(work_dir, env={}) == LoaderSettings()

    def test_unknown_keys_are_ignored(self, home_dir: Path, work_dir: Path) -> None:
        write_config(work_dir, 'model = "ignored"\n')

        assert load_settings(work_dir, env={}) == LoaderSettings()
