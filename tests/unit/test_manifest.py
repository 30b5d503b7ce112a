"""Tests for krds.toml loading."""

from pathlib import Path

import pytest

from krds_forge.core.errors import ManifestError
from krds_forge.core.manifest import MANIFEST_ENV_VAR, load_manifest


@pytest.fixture
def manifest_file(tmp_path: Path) -> Path:
    path = tmp_path / "krds.toml"
    path.write_text(
        """
[tokens]
namespace = "krds"

[output]
theme = "dark"
utilities = false
format = "style-dictionary"
directory = "dist"

[logging]
level = "debug"
"""
    )
    return path


class TestLoadManifest:
    def test_full_manifest(self, manifest_file: Path) -> None:
        manifest = load_manifest(manifest_file)
        assert manifest.path == manifest_file
        assert manifest.tokens.namespace == "krds"
        assert manifest.output.theme == "dark"
        assert manifest.output.utilities is False
        assert manifest.output.format == "style-dictionary"
        assert manifest.output.directory == "dist"
        assert manifest.logging.level == "DEBUG"

    def test_defaults_when_sections_missing(self, tmp_path: Path) -> None:
        path = tmp_path / "krds.toml"
        path.write_text("")
        manifest = load_manifest(path)
        assert manifest.output.theme == "light"
        assert manifest.output.utilities is True
        assert manifest.output.format == "css"
        assert manifest.logging.level == "WARNING"

    def test_missing_default_file_yields_defaults(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv(MANIFEST_ENV_VAR, raising=False)
        manifest = load_manifest()
        assert manifest.path is None
        assert manifest.tokens.namespace == "krds"

    def test_env_var_overrides_lookup(self, manifest_file: Path, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path.parent)
        monkeypatch.setenv(MANIFEST_ENV_VAR, str(manifest_file))
        assert load_manifest().output.theme == "dark"

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        with pytest.raises(ManifestError, match="not found"):
            load_manifest(tmp_path / "nope.toml")

    @pytest.mark.parametrize(
        ("content", "message"),
        [
            ('[output]\ntheme = "sepia"', "theme"),
            ('[output]\ntheme = "high-contrast"', "theme"),
            ('[output]\nformat = "yaml"', "format"),
            ('[output]\nutilities = "yes"', "utilities"),
            ('[logging]\nlevel = "LOUD"', "level"),
            ('output = "css"', "must be a table"),
            ("[output", "krds.toml"),
        ],
    )
    def test_invalid_values(self, tmp_path: Path, content: str, message: str) -> None:
        path = tmp_path / "krds.toml"
        path.write_text(content)
        with pytest.raises(ManifestError, match=message):
            load_manifest(path)
