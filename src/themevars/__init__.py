"""
themevars - theme variable parser for SCSS theme files.

Reads an annotated SCSS theme file into named theme variables with
per-preset values, parent references and darken/lighten metadata.
"""

from __future__ import annotations

from ._version import get_version
from .core import (
    ColorModifier,
    ConfigError,
    EditorSettings,
    ThemeFileError,
    ThemeVariable,
    ThemeVariableDetails,
    ThemeVariablesManager,
    ThemeVarsError,
    load_settings,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "ColorModifier",
    "ConfigError",
    "EditorSettings",
    "ThemeFileError",
    "ThemeVarsError",
    "ThemeVariable",
    "ThemeVariableDetails",
    "ThemeVariablesManager",
    "load_settings",
]
