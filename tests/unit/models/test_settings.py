"""Unit tests for ConverterSettings."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from mgmp_converter.exceptions import ConfigurationError
from mgmp_converter.models.settings import DEFAULT_SRS_NAME, ConverterSettings

# --------------------------- Tests ---------------------------


class TestDefaults:
    def test_default_values(self) -> None:
        settings = ConverterSettings()
        assert settings.security_mapping_list == []
        assert settings.source_system_name is None
        assert settings.default_language == "eng"
        assert settings.gml_srs_name == DEFAULT_SRS_NAME

    def test_default_language_is_normalised(self) -> None:
        assert ConverterSettings(default_language=" FRE ").default_language == "fre"

    def test_blank_default_language_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            ConverterSettings(default_language="  ")


class TestFromFile:
    def test_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text(
            "security_mapping_list:\n"
            "  - secret=SECRET\n"
            "  - official=OFFICIAL\n"
            "source_system_name: Alliance\n",
            encoding="utf-8",
        )

        settings = ConverterSettings.from_file(path)

        assert settings.security_mapping_list == ["secret=SECRET", "official=OFFICIAL"]
        assert settings.source_system_name == "Alliance"

    def test_json(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"default_language": "de"}), encoding="utf-8")
        assert ConverterSettings.from_file(path).default_language == "de"

    def test_empty_yaml_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yml"
        path.write_text("", encoding="utf-8")
        assert ConverterSettings.from_file(path) == ConverterSettings()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="not found"):
            ConverterSettings.from_file(tmp_path / "nope.yaml")

    def test_unsupported_extension(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.ini"
        path.write_text("[x]", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Unsupported"):
            ConverterSettings.from_file(path)

    def test_unparsable_file(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Cannot parse"):
            ConverterSettings.from_file(path)

    def test_top_level_must_be_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="mapping"):
            ConverterSettings.from_file(path)

    def test_unknown_setting_names_the_setting(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("colour: blue\n", encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            ConverterSettings.from_file(path)

        assert exc_info.value.context["setting"] == "colour"
        assert "colour" in exc_info.value.get_recovery_hint()
