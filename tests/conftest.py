"""Shared pytest fixtures for themevars tests."""

from pathlib import Path

import pytest

from themevars.core.manager import ThemeVariablesManager


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def theme_file(fixtures_dir: Path) -> Path:
    """Return path to the sample Helium theme file."""
    return fixtures_dir / "helium.scss"


@pytest.fixture
def helium_manager(theme_file: Path) -> ThemeVariablesManager:
    """Return a manager loaded from the sample theme file."""
    return ThemeVariablesManager.from_file(theme_file)


@pytest.fixture(autouse=True)
def _no_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's THEMEVARS_VARIABLES_FILE out of the tests."""
    monkeypatch.delenv("THEMEVARS_VARIABLES_FILE", raising=False)
