"""Tests for ScriptLocation."""

from pathlib import Path

import pytest

from scriptloader.errors import IdentifierRequiredError
from scriptloader.location import ScriptLocation


class TestScriptLocation:
    """Test script name normalization and nested modules."""

    def test_suffix_is_added(self) -> None:
        assert ScriptLocation("  helpers ").script_name == "helpers.py"
        assert ScriptLocation("helpers.py").script_name == "helpers.py"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_name_is_rejected(self, name: str) -> None:
        with pytest.raises(IdentifierRequiredError):
            ScriptLocation(name)

    def test_full_path(self) -> None:
        location = ScriptLocation.of("script", "lib", "path")

        assert location.full_path == "lib/path/script.py"
        assert str(location) == "lib/path/script.py"
        assert ScriptLocation("script").full_path == "script.py"

    def test_nested_module(self) -> None:
        location = ScriptLocation.of("script", "lib", "path")

        assert location.has_nested_module
        assert location.nested_module == "lib"

        inner = location.without_nested_module()
        assert inner.modules == ("path",)
        assert inner.without_nested_module().nested_module is None
        assert not inner.without_nested_module().has_nested_module

    def test_resolve_uses_search_paths(self, tmp_path: Path) -> None:
        (tmp_path / "lib").mkdir()
        script_file = tmp_path / "lib" / "script.py"
        script_file.write_text("")

        resolved = ScriptLocation.of("script", "lib").resolve([tmp_path])

        assert resolved == script_file.resolve()

    def test_resolve_absolute(self, tmp_path: Path) -> None:
        script_file = tmp_path / "script.py"

        assert ScriptLocation(str(script_file)).resolve() == script_file

    def test_resolve_falls_back_to_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.chdir(tmp_path)

        resolved = ScriptLocation("script").resolve([tmp_path / "elsewhere"])

        assert resolved == (tmp_path / "script.py").resolve()
