"""Unit tests for RecordLoader."""

from __future__ import annotations

import datetime
import json
from pathlib import Path

import pytest

from mgmp_converter.exceptions import RecordLoadError
from mgmp_converter.io.record_loader import RecordLoader
from mgmp_converter.models.taxonomy import Core, DateTime

# --------------------------- Tests ---------------------------


class TestLoad:
    def test_json_attribute_map(self, tmp_path: Path) -> None:
        path = tmp_path / "record.json"
        path.write_text(
            json.dumps(
                {
                    Core.ID: "22407eee80044d92afedcac07fff661b",
                    Core.CREATED: "1972-02-12T21:30:00.000Z",
                    "topic.keyword": ["a", "b"],
                }
            ),
            encoding="utf-8",
        )

        record = RecordLoader.load(path)

        assert record.get_string(Core.ID) == "22407eee80044d92afedcac07fff661b"
        assert record.get_strings("topic.keyword") == ["a", "b"]
        assert record.get_date(Core.CREATED) == datetime.datetime(
            1972, 2, 12, 21, 30, tzinfo=datetime.timezone.utc
        )
        assert record.source_id is None

    def test_yaml_wrapper_with_source_id(self, tmp_path: Path) -> None:
        path = tmp_path / "record.yaml"
        path.write_text(
            "source_id: Alliance\n"
            "attributes:\n"
            "  title: theTitle\n"
            "  datetime.start:\n"
            "    - '2020-01-01T00:00:00Z'\n"
            "    - '2020-01-02T00:00:00+01:00'\n"
            "  isr.cloud-cover: 30\n",
            encoding="utf-8",
        )

        record = RecordLoader.load(path)

        assert record.source_id == "Alliance"
        assert record.get_string("title") == "theTitle"
        assert len(record.get_dates(DateTime.START)) == 2
        assert record.get_value("isr.cloud-cover") == 30

    def test_yaml_native_dates_are_kept(self, tmp_path: Path) -> None:
        path = tmp_path / "record.yml"
        path.write_text("created: 2020-05-17\n", encoding="utf-8")

        record = RecordLoader.load(path)

        assert record.get_date(Core.CREATED) == datetime.datetime(2020, 5, 17)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(RecordLoadError, match="File not found"):
            RecordLoader.load(tmp_path / "missing.json")

    def test_unsupported_extension(self, tmp_path: Path) -> None:
        path = tmp_path / "record.xml"
        path.write_text("<x/>", encoding="utf-8")
        with pytest.raises(RecordLoadError, match="Unsupported extension"):
            RecordLoader.load(path)

    def test_parse_error(self, tmp_path: Path) -> None:
        path = tmp_path / "record.json"
        path.write_text("{broken", encoding="utf-8")
        with pytest.raises(RecordLoadError, match="Cannot parse") as exc_info:
            RecordLoader.load(path)
        assert exc_info.value.context["file_path"] == str(path)
        assert str(path) in exc_info.value.get_recovery_hint()

    def test_top_level_must_be_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "record.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(RecordLoadError, match="mapping"):
            RecordLoader.load(path)

    def test_attributes_must_be_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "record.json"
        path.write_text(json.dumps({"attributes": ["x"]}), encoding="utf-8")
        with pytest.raises(RecordLoadError, match="'attributes' must be a mapping"):
            RecordLoader.load(path)

    def test_bad_date_text(self, tmp_path: Path) -> None:
        path = tmp_path / "record.json"
        path.write_text(json.dumps({Core.MODIFIED: "yesterday"}), encoding="utf-8")
        with pytest.raises(RecordLoadError, match="modified"):
            RecordLoader.load(path)


class TestFromData:
    def test_non_date_attributes_are_untouched(self) -> None:
        record = RecordLoader.from_data({"title": "2020-01-01T00:00:00Z"})
        assert record.get_string("title") == "2020-01-01T00:00:00Z"

    def test_null_date_values_are_dropped_by_lookups(self) -> None:
        record = RecordLoader.from_data({Core.CREATED: None})
        assert record.has(Core.CREATED)
        assert record.get_date(Core.CREATED) is None
