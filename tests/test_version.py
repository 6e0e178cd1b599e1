"""Tests for the version display."""

from importlib.metadata import PackageNotFoundError
from io import StringIO
from unittest.mock import patch

import pytest
from rich.console import Console

from scriptloader.version import get_scriptloader_version, show_version


def make_console() -> tuple[Console, StringIO]:
    buffer = StringIO()
    return Console(file=buffer, no_color=True, width=80), buffer


class TestGetVersion:
    """Test the installed version lookup."""

    def test_installed_version_is_returned(self) -> None:
        with patch("scriptloader.version.version", return_value="1.2.3") as found:
            assert get_scriptloader_version() == "1.2.3"
        found.assert_called_once_with("scriptloader")

    def test_missing_distribution_gives_none(self) -> None:
        with patch(
            "scriptloader.version.version",
            side_effect=PackageNotFoundError("scriptloader"),
        ):
            assert get_scriptloader_version() is None

    def test_other_errors_propagate(self) -> None:
        """Test that only a missing distribution is treated as unknown."""
        with (
            patch("scriptloader.version.version", side_effect=OSError("bad metadata")),
            pytest.raises(OSError, match="bad metadata"),
        ):
            get_scriptloader_version()


class TestShowVersion:
    """Test the version line printed by the CLI."""

    def test_prints_installed_version_and_exits(self) -> None:
        console, buffer = make_console()
        with (
            patch("scriptloader.version.version", return_value="1.2.3"),
            pytest.raises(SystemExit) as exc_info,
        ):
            show_version(console)

        assert buffer.getvalue().strip() == "scriptloader 1.2.3"
        assert exc_info.value.code == 0

    def test_reports_a_checkout_without_metadata(self) -> None:
        console, buffer = make_console()
        with (
            patch(
                "scriptloader.version.version",
                side_effect=PackageNotFoundError("scriptloader"),
            ),
            pytest.raises(SystemExit) as exc_info,
        ):
            show_version(console)

        assert buffer.getvalue().strip() == "scriptloader (not installed)"
        assert exc_info.value.code == 0
