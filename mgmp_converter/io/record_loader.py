"""Concrete loader that builds a SourceRecord from local YAML / JSON files."""

from __future__ import annotations

import datetime
import logging
from pathlib import Path
from typing import Any

from dateutil import parser as date_parser
from pydantic import ValidationError

from ..exceptions import RecordLoadError
from ..models.record import SourceRecord
from ..models.taxonomy import DATE_ATTRIBUTES
from .file_loader import SUPPORTED_EXTS, load_structured_file

logger = logging.getLogger(__name__)

ATTRIBUTES_KEY = "attributes"
SOURCE_ID_KEY = "source_id"


class RecordLoader:
    """Read a record file from disk and return a `SourceRecord`."""

    supported_exts: set[str] = SUPPORTED_EXTS

    @staticmethod
    def load(path: str | Path) -> SourceRecord:
        file_path = Path(path)
        data = load_structured_file(
            file_path, lambda message: RecordLoadError(message, str(file_path))
        )

        if not isinstance(data, dict):
            raise RecordLoadError("Top-level object must be a mapping", str(file_path))

        record = RecordLoader.from_data(data, str(file_path))
        logger.debug("Record file loaded (%d attributes)", len(record.attributes))
        return record

    @staticmethod
    def from_data(data: dict[str, Any], file_path: str | None = None) -> SourceRecord:
        """
        Build a record from an already parsed mapping.

        The mapping is either the attribute map itself or a wrapper holding
        ``attributes`` and an optional ``source_id``.
        """
        if ATTRIBUTES_KEY in data:
            attributes = data[ATTRIBUTES_KEY]
            source_id = data.get(SOURCE_ID_KEY)
            if not isinstance(attributes, dict):
                raise RecordLoadError(f"'{ATTRIBUTES_KEY}' must be a mapping", file_path)
        else:
            attributes = data
            source_id = None

        try:
            parsed = {
                name: _parse_dates(name, value) for name, value in attributes.items()
            }
            return SourceRecord.from_mapping(
                parsed, None if source_id is None else str(source_id)
            )
        except (ValueError, OverflowError, ValidationError) as exc:
            raise RecordLoadError(f"Invalid record: {exc}", file_path) from exc


def _parse_dates(name: str, value: Any) -> Any:
    if name not in DATE_ATTRIBUTES:
        return value
    if isinstance(value, list | tuple):
        return [_to_datetime(name, item) for item in value]
    return _to_datetime(name, value)


def _to_datetime(name: str, value: Any) -> Any:
    if isinstance(value, datetime.datetime) or value is None:
        return value
    if isinstance(value, datetime.date):
        return datetime.datetime.combine(value, datetime.time())
    if isinstance(value, str):
        try:
            return date_parser.isoparse(value)
        except ValueError as exc:
            raise ValueError(f"{name}: '{value}' is not an ISO 8601 date") from exc
    return value
