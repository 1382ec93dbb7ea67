"""Tests for DTCG tokens.json export."""

from __future__ import annotations

import json
from pathlib import Path

from themevars.core.dtcg_export import export_dtcg_file, generate_dtcg_tokens
from themevars.core.manager import ThemeVariablesManager


class TestGenerateDtcgTokens:
    def test_groups_by_preset_and_module(self, helium_manager: ThemeVariablesManager) -> None:
        tokens = generate_dtcg_tokens(helium_manager)
        assert list(tokens) == ["light", "dark"]
        assert list(tokens["light"]) == ["Common", "Buttons", "Text"]
        assert list(tokens["dark"]["Common"]) == ["primary-color", "focus-color"]

    def test_plain_color_token(self, helium_manager: ThemeVariablesManager) -> None:
        token = generate_dtcg_tokens(helium_manager)["dark"]["Text"]["text-color"]
        assert token == {"$type": "color", "$value": "#EEEEEE"}

    def test_inherited_value_becomes_alias(self, helium_manager: ThemeVariablesManager) -> None:
        tokens = generate_dtcg_tokens(helium_manager)
        focus = tokens["dark"]["Common"]["focus-color"]
        assert focus["$value"] == "{dark.Common.primary-color}"
        assert focus["$extensions"]["themevars"]["parent"] == "--primary-color"

        button = tokens["light"]["Buttons"]["button-color"]
        assert button["$value"] == "{light.Common.primary-color}"

    def test_annotation_parent_keeps_literal_value(
        self, helium_manager: ThemeVariablesManager
    ) -> None:
        hover = generate_dtcg_tokens(helium_manager)["light"]["Common"]["primary-hover-color"]
        assert hover["$value"] == "#5440AC"
        assert hover["$extensions"]["themevars"] == {
            "parent": "--primary-color",
            "modifier": {"type": "darken", "percent": 10},
        }

    def test_rgb_used_extension(self, helium_manager: ThemeVariablesManager) -> None:
        primary = generate_dtcg_tokens(helium_manager)["light"]["Common"]["primary-color"]
        assert primary["$extensions"]["themevars"] == {"rgbUsed": True}

    def test_dotted_module_label_keeps_alias_resolvable(self) -> None:
        manager = ThemeVariablesManager.from_text(
            "/* Forms.Inputs */\n  --input-color: #2A8463;\n  --border-color: var(--input-color);"
        )
        tokens = generate_dtcg_tokens(manager)
        assert list(tokens["light"]) == ["Forms-Inputs"]

        alias = tokens["light"]["Forms-Inputs"]["border-color"]["$value"]
        preset, group, name = alias.strip("{}").split(".")
        assert tokens[preset][group][name]["$value"] == "#2A8463"

    def test_empty_manager(self) -> None:
        assert generate_dtcg_tokens(ThemeVariablesManager()) == {"light": {}}


class TestExportDtcgFile:
    def test_writes_json(self, tmp_path: Path, helium_manager: ThemeVariablesManager) -> None:
        output = tmp_path / "out" / "tokens.json"
        result = export_dtcg_file(helium_manager, output)
        assert result == output
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data == generate_dtcg_tokens(helium_manager)
