"""
Intermediate representation of parsed theme variables.
"""

from .theme_variable import ColorModifier, ThemeVariable, ThemeVariableDetails

__all__ = [
    "ColorModifier",
    "ThemeVariable",
    "ThemeVariableDetails",
]
