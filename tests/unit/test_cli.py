"""Tests for CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from themevars.cli import app


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture
def test_project(tmp_path: Path, theme_file: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a temporary project with themevars.toml and chdir into it."""
    styles = tmp_path / "styles"
    styles.mkdir()
    (styles / "helium.scss").write_text(theme_file.read_text(encoding="utf-8"))
    (tmp_path / "themevars.toml").write_text(
        '[editor]\ntheme_variables_file_path = "styles/helium.scss"\n'
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestVersion:
    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert result.output.startswith("themevars ")


class TestPresets:
    def test_presets_from_settings(self, cli_runner: CliRunner, test_project: Path) -> None:
        result = cli_runner.invoke(app, ["presets"])
        assert result.exit_code == 0
        assert result.output.split() == ["light", "dark"]

    def test_presets_without_configuration(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        result = cli_runner.invoke(app, ["presets"])
        assert result.exit_code == 0
        assert result.output.split() == ["light"]


class TestList:
    def test_json_output(self, cli_runner: CliRunner, test_project: Path) -> None:
        result = cli_runner.invoke(app, ["list", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [v["name"] for v in data][:2] == ["--primary-color", "--primary-hover-color"]
        assert data[0]["details"]["dark"]["value"] == "#6374AC"

    def test_filters(self, cli_runner: CliRunner, test_project: Path) -> None:
        result = cli_runner.invoke(app, ["list", "--json", "-m", "Common", "-p", "dark"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert all(v["module"] == "Common" for v in data)
        assert all(set(v["details"]) <= {"dark"} for v in data)

    def test_unknown_preset(self, cli_runner: CliRunner, test_project: Path) -> None:
        result = cli_runner.invoke(app, ["list", "--preset", "sepia"])
        assert result.exit_code == 1

    def test_table_output(self, cli_runner: CliRunner, test_project: Path) -> None:
        result = cli_runner.invoke(app, ["list"])
        assert result.exit_code == 0
        assert "7 variable(s) shown" in result.output

    def test_explicit_file(self, cli_runner: CliRunner, theme_file: Path, tmp_path: Path) -> None:
        result = cli_runner.invoke(
            app, ["list", "--json", "--file", str(theme_file), "--config", str(tmp_path / "x")]
        )
        assert result.exit_code == 0
        assert len(json.loads(result.output)) == 7

    def test_missing_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(app, ["list", "--file", str(tmp_path / "nope.scss")])
        assert result.exit_code == 1

    def test_broken_settings(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "themevars.toml"
        config.write_text("[editor\n")
        result = cli_runner.invoke(app, ["list", "--config", str(config)])
        assert result.exit_code == 1


class TestShow:
    def test_show_variable(self, cli_runner: CliRunner, test_project: Path) -> None:
        result = cli_runner.invoke(app, ["show", "focus-color"])
        assert result.exit_code == 0
        assert "--focus-color" in result.output
        assert "declared as var(--primary-color)" in result.output

    def test_show_unknown(self, cli_runner: CliRunner, test_project: Path) -> None:
        result = cli_runner.invoke(app, ["show", "missing-color"])
        assert result.exit_code == 1


class TestExport:
    def test_export(self, cli_runner: CliRunner, test_project: Path) -> None:
        result = cli_runner.invoke(app, ["export", "-o", "build/tokens.json"])
        assert result.exit_code == 0
        data = json.loads((test_project / "build" / "tokens.json").read_text())
        assert list(data) == ["light", "dark"]
