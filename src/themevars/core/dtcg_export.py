"""
W3C Design Token Community Group (DTCG) tokens.json export.

Generates a DTCG document from parsed theme variables, one top-level
group per color preset and one nested group per module.
See: https://design-tokens.github.io/community-group/format/
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from .grammar import find_var_reference
from .ir import ColorModifier, ThemeVariable, ThemeVariableDetails
from .manager import ThemeVariablesManager


def _token_name(variable_name: str) -> str:
    # DTCG names may not start with "$" or contain "{", "}" or "."
    return variable_name.removeprefix("--")


def _group_name(module: str) -> str:
    # module labels are free text; "." would split the alias path
    return re.sub(r"[.{}]", "-", module).lstrip("$")


def _token(
    preset: str,
    variable: ThemeVariable,
    details: ThemeVariableDetails,
    module_of: dict[str, str],
) -> dict[str, Any]:
    token: dict[str, Any] = {"$type": "color", "$value": details.value}

    parent = details.parent_variable
    if parent is not None and parent in module_of and find_var_reference(details.placeholder):
        # inherited through var(), alias the parent token
        token["$value"] = f"{{{preset}.{_group_name(module_of[parent])}.{_token_name(parent)}}}"

    extensions: dict[str, Any] = {}
    if parent is not None:
        extensions["parent"] = parent
    if details.color_modifier is not ColorModifier.NONE:
        extensions["modifier"] = {
            "type": details.color_modifier.value,
            "percent": details.color_modifier_value,
        }
    if variable.rgb_used:
        extensions["rgbUsed"] = True
    if extensions:
        token["$extensions"] = {"themevars": extensions}

    return token


def generate_dtcg_tokens(manager: ThemeVariablesManager) -> dict[str, Any]:
    """Generate DTCG format design tokens from parsed theme variables.

    Args:
        manager: Loaded ThemeVariablesManager.

    Returns:
        DTCG-formatted dict suitable for writing as tokens.json.
    """
    variables = manager.get_theme_variables()
    module_of = {v.name: v.module for v in variables}

    dtcg: dict[str, Any] = {}
    for preset in manager.get_color_presets():
        preset_group: dict[str, Any] = {}
        for variable in variables:
            details = variable.get_details(preset)
            if details is None:
                continue
            module_group = preset_group.setdefault(_group_name(variable.module), {})
            token_name = _token_name(variable.name)
            module_group[token_name] = _token(preset, variable, details, module_of)
        dtcg[preset] = preset_group

    return dtcg


def export_dtcg_file(manager: ThemeVariablesManager, output_path: Path) -> Path:
    """Generate DTCG tokens and write to a JSON file.

    Args:
        manager: Loaded ThemeVariablesManager.
        output_path: Path to write tokens.json.

    Returns:
        Path to the written file.
    """
    tokens = generate_dtcg_tokens(manager)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(tokens, indent=2),
        encoding="utf-8",
    )

    return output_path
