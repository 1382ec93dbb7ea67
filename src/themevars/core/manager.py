"""
Theme variables manager.

Loads the theme variables file named by the editor settings and exposes
the parsed variables and color presets. The registries are built once,
in the constructor, and only read afterwards.

Failures never escape: a missing path setting yields an empty model and
a read error is logged, keeping whatever was parsed before it.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Any

from .errors import ErrorContext, ThemeFileError
from .ir import ThemeVariable, ThemeVariableDetails
from .resolver import ThemeVariableResolver
from .settings import VARIABLES_FILE_PATH_KEY, EditorSettings

logger = logging.getLogger(__name__)


class ThemeVariablesManager:
    """Parsed theme variables and color presets."""

    def __init__(self, settings: EditorSettings | None = None) -> None:
        self.settings = settings or EditorSettings()
        self._resolver = ThemeVariableResolver(
            default_preset=self.settings.default_preset,
            rgb_suffixes=self.settings.rgb_suffixes,
        )
        self._init_theme_variables()

    @classmethod
    def from_file(cls, path: Path | str, **overrides: Any) -> ThemeVariablesManager:
        """Build a manager for an explicit file, bypassing configuration lookup."""
        return cls(EditorSettings(theme_variables_file_path=str(path), **overrides))

    @classmethod
    def from_text(cls, text: str, settings: EditorSettings | None = None) -> ThemeVariablesManager:
        """Build a manager from in-memory file content."""
        manager = cls(replace(settings or EditorSettings(), theme_variables_file_path=None))
        manager._resolver.scan(text.splitlines())
        return manager

    # ------------------------------------------------------------------
    # Query surface
    # ------------------------------------------------------------------

    def get_theme_variables(self) -> list[ThemeVariable]:
        """Variables in order of first appearance."""
        return self._resolver.theme_variables

    def get_color_presets(self) -> list[str]:
        """Presets in discovery order, default preset first."""
        return self._resolver.color_presets

    def get_theme_variable(self, name: str) -> ThemeVariable | None:
        return self._resolver.get_theme_variable(name)

    def get_parent(self, details: ThemeVariableDetails) -> ThemeVariable | None:
        """Resolve the parent reference of a details record (one hop)."""
        if details.parent_variable is None:
            return None
        return self._resolver.get_theme_variable(details.parent_variable)

    def get_modules(self) -> list[str]:
        """Module names in order of first appearance."""
        return list(dict.fromkeys(v.module for v in self.get_theme_variables()))

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for JSON serialization."""
        return {
            "presets": self.get_color_presets(),
            "variables": [v.model_dump(mode="json") for v in self.get_theme_variables()],
        }

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def _init_theme_variables(self) -> None:
        file_path = self.settings.get(VARIABLES_FILE_PATH_KEY)
        if file_path is None:
            logger.debug("No theme variables file configured")
            return

        path = Path(file_path)
        try:
            self._load(path)
        except ThemeFileError:
            logger.error("Error parsing file with theme variables", exc_info=True)
            return

        logger.info(
            "Loaded %d theme variables in %d presets from %s",
            len(self._resolver.theme_variables),
            len(self._resolver.color_presets),
            path,
        )

    def _load(self, path: Path) -> None:
        state = self._resolver.new_state()
        try:
            with path.open(encoding=self.settings.encoding) as f:
                self._resolver.scan(f, state)
        except (OSError, LookupError, ValueError) as e:
            # ValueError covers decode errors and NUL bytes in the path,
            # LookupError an unknown encoding
            raise ThemeFileError(
                f"Cannot read theme variables file: {e}",
                ErrorContext(path, state.line_number + 1),
            ) from e
