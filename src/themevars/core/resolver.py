"""
Theme variable resolver.

Builds the variable and preset registries from the lines of a theme
variables file in a single forward pass. Parent references only see
variables registered earlier in the scan: a variable that references a
parent declared further down the file gets no parent.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from . import grammar
from .ir import ColorModifier, ThemeVariable, ThemeVariableDetails
from .settings import DEFAULT_PRESET, DEFAULT_RGB_SUFFIXES

logger = logging.getLogger(__name__)


@dataclass
class ScanState:
    """Position-dependent state of the scan."""

    preset: str = DEFAULT_PRESET
    module: str | None = None
    line_number: int = 0

    @property
    def inside_module(self) -> bool:
        return self.module is not None


class ThemeVariableResolver:
    """Owns the variable and preset registries and fills them line by line."""

    def __init__(
        self,
        default_preset: str = DEFAULT_PRESET,
        rgb_suffixes: Iterable[str] = DEFAULT_RGB_SUFFIXES,
    ) -> None:
        self.default_preset = default_preset
        self.rgb_suffixes = tuple(rgb_suffixes)
        self._variables: dict[str, ThemeVariable] = {}
        self._presets: list[str] = [default_preset]

    @property
    def theme_variables(self) -> list[ThemeVariable]:
        return list(self._variables.values())

    @property
    def color_presets(self) -> list[str]:
        return list(self._presets)

    def new_state(self) -> ScanState:
        return ScanState(preset=self.default_preset)

    def get_theme_variable(self, name: str) -> ThemeVariable | None:
        return self._variables.get(name)

    def scan(self, lines: Iterable[str], state: ScanState | None = None) -> ScanState:
        """Feed every line to the resolver and return the final scan state."""
        state = state or self.new_state()
        for line in lines:
            self.feed_line(line, state)
        return state

    def feed_line(self, line: str, state: ScanState) -> None:
        """Apply the module, preset and variable recognizers to one line."""
        state.line_number += 1

        module = grammar.match_module_marker(line)
        if module is not None:
            logger.debug("Line %d: entering module %r", state.line_number, module)
            state.module = module

        preset = grammar.match_preset_marker(line)
        if preset is not None:
            state.preset = preset
            self._register_preset(preset)

        if not state.inside_module:
            return

        declaration = grammar.match_variable_declaration(line)
        if declaration is not None:
            self._resolve_declaration(declaration, state)

    def _register_preset(self, preset: str) -> None:
        if preset not in self._presets:
            logger.debug("Discovered color preset %r", preset)
            self._presets.append(preset)

    def _resolve_declaration(
        self, declaration: grammar.VariableDeclaration, state: ScanState
    ) -> None:
        value = declaration.value
        parent: ThemeVariable | None = None

        referenced = grammar.find_var_reference(value)
        if referenced is not None:
            parent = self.get_theme_variable(referenced)
            if parent is not None:
                inherited = parent.get_details(state.preset)
                if inherited is not None:
                    value = inherited.value
        elif declaration.parent_ref is not None:
            parent = self.get_theme_variable(declaration.parent_ref)

        if grammar.is_rgb_triplet(value):
            base_name = grammar.strip_rgb_suffix(declaration.name, self.rgb_suffixes)
            if base_name is not None:
                self._mark_rgb_used(base_name)
                return

        if not grammar.is_hex_color(value):
            return

        modifier = ColorModifier.from_letter(declaration.modifier)
        details = ThemeVariableDetails(
            value=value,
            placeholder=declaration.value,
            parent_variable=parent.name if parent is not None else None,
            color_modifier=modifier,
            color_modifier_value=(
                declaration.modifier_value if modifier is not ColorModifier.NONE else None
            ),
        )

        variable = self.get_theme_variable(declaration.name)
        if variable is None:
            variable = ThemeVariable(name=declaration.name, module=state.module or "")
        self._variables[variable.name] = variable.model_copy(
            update={"details": {**variable.details, state.preset: details}}
        )

    def _mark_rgb_used(self, base_name: str) -> None:
        variable = self.get_theme_variable(base_name)
        if variable is not None:
            self._variables[base_name] = variable.model_copy(update={"rgb_used": True})
