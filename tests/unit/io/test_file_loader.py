"""Unit tests for the shared YAML / JSON file reader."""

from __future__ import annotations

from pathlib import Path

import pytest

from mgmp_converter.exceptions import ConfigurationError, RecordLoadError
from mgmp_converter.io.file_loader import SUPPORTED_EXTS, load_structured_file

# --------------------------- Tests ---------------------------


class TestLoadStructuredFile:
    def test_supported_extensions(self) -> None:
        assert SUPPORTED_EXTS == {".yaml", ".yml", ".json"}

    def test_yaml_and_json_give_the_same_data(self, tmp_path: Path) -> None:
        yaml_path = tmp_path / "data.yaml"
        yaml_path.write_text("a: 1\nb: [x, y]\n", encoding="utf-8")
        json_path = tmp_path / "data.JSON"
        json_path.write_text('{"a": 1, "b": ["x", "y"]}', encoding="utf-8")

        assert load_structured_file(yaml_path, ConfigurationError) == {
            "a": 1,
            "b": ["x", "y"],
        }
        assert load_structured_file(json_path, ConfigurationError) == {
            "a": 1,
            "b": ["x", "y"],
        }

    def test_empty_yaml_is_none(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yml"
        path.write_text("", encoding="utf-8")
        assert load_structured_file(path, ConfigurationError) is None

    def test_errors_use_the_given_exception(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.yaml"

        with pytest.raises(ConfigurationError, match="File not found"):
            load_structured_file(path, ConfigurationError)
        with pytest.raises(RecordLoadError, match="File not found") as exc_info:
            load_structured_file(path, lambda msg: RecordLoadError(msg, str(path)))
        assert exc_info.value.context["file_path"] == str(path)

    def test_unsupported_extension(self, tmp_path: Path) -> None:
        path = tmp_path / "data.ini"
        path.write_text("[x]", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Unsupported extension '.ini'"):
            load_structured_file(path, ConfigurationError)

    @pytest.mark.parametrize(
        "name, text", [("bad.json", "{broken"), ("bad.yaml", "a: [1, 2\n")]
    )
    def test_parse_errors(self, tmp_path: Path, name: str, text: str) -> None:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        with pytest.raises(ConfigurationError, match=f"Cannot parse {name}"):
            load_structured_file(path, ConfigurationError)
