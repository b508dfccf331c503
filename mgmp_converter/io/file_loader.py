"""Shared YAML / JSON reading for record and settings files."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any, Final

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..exceptions import MgmpConverterError

logger = logging.getLogger(__name__)

YAML_EXTS: Final[set[str]] = {".yaml", ".yml"}
JSON_EXTS: Final[set[str]] = {".json"}
SUPPORTED_EXTS: Final[set[str]] = YAML_EXTS | JSON_EXTS

_yaml_parser = YAML(typ="safe")  # safe loader, YAML 1.2


def load_structured_file(
    path: str | Path, error: Callable[[str], MgmpConverterError]
) -> Any:
    """
    Parse a YAML or JSON file.

    Args:
        path: File location.
        error: Builds the exception raised for each failure from its message.

    Returns:
        The parsed document, None for an empty YAML file.
    """
    file_path = Path(path)

    # validation
    if not file_path.exists():
        logger.error("File not found: %s", file_path)
        raise error(f"File not found: {file_path}")

    suffix = file_path.suffix.lower()
    if suffix not in SUPPORTED_EXTS:
        raise error(
            f"Unsupported extension '{file_path.suffix}'. "
            f"Supported: {', '.join(sorted(SUPPORTED_EXTS))}"
        )

    raw_text = file_path.read_text(encoding="utf-8")

    # parse
    try:
        if suffix in YAML_EXTS:
            return _yaml_parser.load(raw_text)
        return json.loads(raw_text)
    except (YAMLError, json.JSONDecodeError) as exc:
        raise error(f"Cannot parse {file_path.name}: {exc}") from exc
