"""
Theme variable IR types.

A ThemeVariable is a named design token (a CSS custom property such as
``--primary-color``) with one ThemeVariableDetails entry per color preset
it was declared in.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ColorModifier(StrEnum):
    """Color derivation applied on top of a parent variable's color."""

    NONE = "none"
    DARKEN = "darken"
    LIGHTEN = "lighten"

    @classmethod
    def from_letter(cls, letter: str | None) -> ColorModifier:
        """Map an annotation letter (``d``/``l``, any case) to a modifier."""
        if not letter:
            return cls.NONE
        return {"d": cls.DARKEN, "l": cls.LIGHTEN}.get(letter.lower(), cls.NONE)


class ThemeVariableDetails(BaseModel):
    """
    Value of a theme variable for a single color preset.

    Example:
        ThemeVariableDetails(
            value="#5440AC",
            placeholder="#5440AC",
            parent_variable="--primary-color",
            color_modifier=ColorModifier.DARKEN,
            color_modifier_value=10,
        )
    """

    model_config = ConfigDict(frozen=True)

    value: str = Field(description="Resolved literal value (hex color)")
    placeholder: str = Field(description="Value token as written in the file")
    parent_variable: str | None = Field(
        default=None, description="Name of the variable this one is derived from"
    )
    color_modifier: ColorModifier = Field(default=ColorModifier.NONE)
    color_modifier_value: int | None = Field(
        default=None, description="Modifier magnitude in percent"
    )

    @model_validator(mode="after")
    def _check_modifier(self) -> ThemeVariableDetails:
        has_modifier = self.color_modifier is not ColorModifier.NONE
        if has_modifier != (self.color_modifier_value is not None):
            raise ValueError(
                "color_modifier_value must be set exactly when color_modifier is not 'none'"
            )
        return self


class ThemeVariable(BaseModel):
    """
    A theme variable with per-preset values.

    Presets without an explicit declaration have no entry; there is no
    fallback to another preset. Instances are immutable once built; the
    resolver replaces a variable when a later line adds to it.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    module: str
    rgb_used: bool = False
    details: dict[str, ThemeVariableDetails] = Field(default_factory=dict)

    def get_details(self, preset: str) -> ThemeVariableDetails | None:
        return self.details.get(preset)

    @property
    def presets(self) -> list[str]:
        """Presets this variable is declared in, in declaration order."""
        return list(self.details)
