"""Tests for CLI commands."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from krds_forge.cli import app
from krds_forge.core.manifest import MANIFEST_ENV_VAR


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch) -> Path:
    """Run every command away from any real krds.toml."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(MANIFEST_ENV_VAR, raising=False)
    return tmp_path


def test_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "krds-forge" in result.stdout


def test_no_args_shows_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(app, [])
    assert "Usage" in result.output


class TestCssCommand:
    def test_light_stylesheet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["css"])
        assert result.exit_code == 0
        assert result.stdout.startswith(":root {")
        assert '[data-theme="dark"]' not in result.stdout
        assert ".krds-btn {" in result.stdout

    def test_dark_without_utilities(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["css", "--theme", "dark", "--no-utilities"])
        assert result.exit_code == 0
        assert '[data-theme="dark"] {' in result.stdout
        assert ".krds-btn {" not in result.stdout

    def test_invalid_theme(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["css", "--theme", "sepia"])
        assert result.exit_code != 0

    def test_write_to_file(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        target = isolated_cwd / "out" / "tokens.css"
        result = cli_runner.invoke(app, ["css", "--output", str(target)])
        assert result.exit_code == 0
        assert target.read_text(encoding="utf-8").startswith(":root {")

    def test_manifest_defaults(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        (isolated_cwd / "krds.toml").write_text('[output]\ntheme = "dark"\nutilities = false\n')
        result = cli_runner.invoke(app, ["css"])
        assert result.exit_code == 0
        assert '[data-theme="dark"] {' in result.stdout
        assert ".krds-btn {" not in result.stdout

    def test_invalid_manifest(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        manifest = isolated_cwd / "bad.toml"
        manifest.write_text('[output]\ntheme = "sepia"\n')
        result = cli_runner.invoke(app, ["--manifest", str(manifest), "css"])
        assert result.exit_code == 1


class TestTokensCommand:
    def test_style_dictionary(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["tokens", "--format", "style-dictionary"])
        assert result.exit_code == 0
        tree = json.loads(result.stdout)
        assert tree["spacing"]["4"] == {"value": "16px"}

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["tokens", "--format", "json"])
        assert result.exit_code == 0
        export = json.loads(result.stdout)
        assert export["meta"]["version"] == "1.0.0"
        assert "color" in export["tokens"]


class TestTokenCommand:
    def test_known_token(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["token", "krds-light-color-primary-background-default"])
        assert result.exit_code == 0
        assert "#004494" in result.stdout
        assert "color primary background (default)" in result.stdout

    def test_unknown_token(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["token", "krds-gradient-primary"])
        assert result.exit_code == 1


def test_validate(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(app, ["validate"])
    assert result.exit_code == 0
    assert "valid" in result.stdout


class TestComponentCommands:
    def test_component_html(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            app, ["component", "button", "--variant", "button_size_small.html", "--part", "html"]
        )
        assert result.exit_code == 0
        assert result.stdout.strip() == '<button type="button" class="krds-btn small">Button</button>'

    def test_component_css(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["component", "alert", "--part", "css"])
        assert result.exit_code == 0
        assert result.stdout.startswith("/* krds-alert styles */")

    def test_unknown_component(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["component", "spaceship"])
        assert result.exit_code == 1
        assert "spaceship" in result.output

    def test_components_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["components", "--category", "feedback"])
        assert result.exit_code == 0
        assert "alert" in result.stdout
        assert "button" not in result.stdout

    def test_preview(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        target = isolated_cwd / "modal.html"
        result = cli_runner.invoke(
            app, ["preview", "modal", "--viewport", "mobile", "--output", str(target)]
        )
        assert result.exit_code == 0
        page = target.read_text(encoding="utf-8")
        assert "width: 360px;" in page
        assert 'class="krds-modal medium"' in page


def test_build(cli_runner: CliRunner, isolated_cwd: Path) -> None:
    out_dir = isolated_cwd / "build"
    result = cli_runner.invoke(app, ["build", "--output", str(out_dir)])
    assert result.exit_code == 0
    assert (out_dir / "tokens.css").read_text(encoding="utf-8").startswith(":root {")
    assert json.loads((out_dir / "tokens.json").read_text(encoding="utf-8"))["tokens"]
    assert (out_dir / "components" / "button.html").exists()
    assert (out_dir / "components" / "table.css").exists()
