"""
Editor settings loaded from themevars.toml.

Example themevars.toml:

    [editor]
    theme_variables_file_path = "styles/helium.scss"
    encoding = "utf-8"
    rgb_suffixes = ["-rgb", "_rgb"]
    default_preset = "light"

The theme variables file path can also be supplied through the
THEMEVARS_VARIABLES_FILE environment variable, which wins over the file.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import ConfigError, ErrorContext

SETTINGS_FILE = "themevars.toml"
VARIABLES_FILE_ENV = "THEMEVARS_VARIABLES_FILE"

VARIABLES_FILE_PATH_KEY = "editor.theme_variables_file_path"

DEFAULT_PRESET = "light"
DEFAULT_RGB_SUFFIXES = ("-rgb", "_rgb")


@dataclass
class EditorSettings:
    """Settings of the [editor] table."""

    theme_variables_file_path: str | None = None
    encoding: str = "utf-8"
    rgb_suffixes: tuple[str, ...] = DEFAULT_RGB_SUFFIXES
    default_preset: str = DEFAULT_PRESET
    extra: dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a setting by its dotted name (e.g. ``editor.encoding``)."""
        section, _, name = key.partition(".")
        if section != "editor" or not name:
            return default
        if name in self.extra:
            return self.extra[name]
        value = getattr(self, name, None)
        if value is None:
            return default
        return value


def _as_str(data: dict[str, Any], key: str, default: str | None, path: Path) -> str | None:
    value = data.get(key, default)
    if value is not None and not isinstance(value, str):
        raise ConfigError(f"editor.{key} must be a string", ErrorContext(path))
    return value


def load_settings(path: Path | None = None) -> EditorSettings:
    """
    Load editor settings.

    Args:
        path: Path to a themevars.toml file. When None, or when the file
            does not exist, defaults are used.

    Returns:
        EditorSettings with environment overrides applied.

    Raises:
        ConfigError: If the file exists but is not valid TOML or has
            values of the wrong type.
    """
    settings = EditorSettings()

    if path is not None and path.exists():
        try:
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML: {e}", ErrorContext(path)) from e

        editor = data.get("editor", {})
        if not isinstance(editor, dict):
            raise ConfigError("[editor] must be a table", ErrorContext(path))

        file_path = _as_str(editor, "theme_variables_file_path", None, path)
        if file_path is not None and not Path(file_path).is_absolute():
            file_path = str(path.parent / file_path)

        suffixes = editor.get("rgb_suffixes", list(DEFAULT_RGB_SUFFIXES))
        if not isinstance(suffixes, list) or not all(isinstance(s, str) for s in suffixes):
            raise ConfigError("editor.rgb_suffixes must be a list of strings", ErrorContext(path))

        known = {"theme_variables_file_path", "encoding", "rgb_suffixes", "default_preset"}
        settings = EditorSettings(
            theme_variables_file_path=file_path,
            encoding=_as_str(editor, "encoding", "utf-8", path) or "utf-8",
            rgb_suffixes=tuple(suffixes),
            default_preset=_as_str(editor, "default_preset", DEFAULT_PRESET, path)
            or DEFAULT_PRESET,
            extra={k: v for k, v in editor.items() if k not in known},
        )

    env_path = os.environ.get(VARIABLES_FILE_ENV)
    if env_path:
        settings.theme_variables_file_path = env_path

    return settings
