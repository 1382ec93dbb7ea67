"""
Core theme variable parsing: grammar, resolver, manager and export.
"""

from .errors import ConfigError, ThemeFileError, ThemeVarsError
from .ir import ColorModifier, ThemeVariable, ThemeVariableDetails
from .manager import ThemeVariablesManager
from .resolver import ScanState, ThemeVariableResolver
from .settings import EditorSettings, load_settings

__all__ = [
    "ColorModifier",
    "ConfigError",
    "EditorSettings",
    "ScanState",
    "ThemeFileError",
    "ThemeVarsError",
    "ThemeVariable",
    "ThemeVariableDetails",
    "ThemeVariableResolver",
    "ThemeVariablesManager",
    "load_settings",
]
