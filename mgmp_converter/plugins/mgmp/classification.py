"""
Security classification crosswalks.

Two vocabularies are involved: the fine-grained MGMP_ClassificationCode
(unclassified, restricted, confidential, secret, topSecret) and the coarser
MGMP_ClassificationUK_GovCode (official, officialSensitive, secret,
topSecret). Each written classification field is resolved by an ordered list
of resolvers; the first one returning a code wins.
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import NamedTuple

from mgmp_converter.models.record import SourceRecord
from mgmp_converter.models.taxonomy import Security

from .constants import (
    CLASSIFICATION_CODE,
    CLASSIFICATION_LABELS,
    CLASSIFICATION_TO_UK_GOV,
    UK_GOV_CLASSIFICATION_LABELS,
    UK_GOVERNMENT_CLASSIFICATION_CODE,
)

logger = logging.getLogger(__name__)

MAPPING_SEPARATOR = "="


class ClassificationCode(NamedTuple):
    """A resolved code: code list URI, code list value and display label."""

    code_list: str
    value: str
    label: str


ClassificationResolver = Callable[[SourceRecord], ClassificationCode | None]


class SecurityMapping:
    """
    Bidirectional map between UK government codes and local record values.

    Built from entries such as ``"secret=SECRET"``. Both keys and values are
    unique; putting a pair evicts any earlier pair sharing its key or value.
    """

    def __init__(self) -> None:
        self._forward: dict[str, str] = {}
        self._inverse: dict[str, str] = {}

    @classmethod
    def from_list(cls, entries: Iterable[str | None]) -> "SecurityMapping":
        """
        Parse ``key=value`` entries.

        Blank entries are ignored; entries that do not split into two
        non-empty parts are logged and skipped.
        """
        mapping = cls()
        for entry in entries:
            if not entry:
                continue
            parts = entry.split(MAPPING_SEPARATOR)
            if len(parts) == 2 and all(parts):
                logger.debug(f"Adding mapping : {parts[0]} = {parts[1]}")
                mapping.put(parts[0], parts[1])
            else:
                logger.debug(f"Unable to split string {entry}")
        return mapping

    def put(self, key: str, value: str) -> None:
        if key in self._forward:
            del self._inverse[self._forward.pop(key)]
        if value in self._inverse:
            del self._forward[self._inverse.pop(value)]
        self._forward[key] = value
        self._inverse[value] = key

    def get(self, key: str) -> str | None:
        return self._forward.get(key)

    def inverse_get(self, value: str) -> str | None:
        return self._inverse.get(value)

    def to_list(self) -> list[str]:
        """Entries as ``key=value`` strings, ordered by key."""
        return [
            f"{key}{MAPPING_SEPARATOR}{self._forward[key]}"
            for key in sorted(self._forward)
        ]

    def __len__(self) -> int:
        return len(self._forward)

    def __contains__(self, key: object) -> bool:
        return key in self._forward


def _lookup_ignore_case(table: dict[str, str], key: str) -> tuple[str, str] | None:
    """Returns (canonical key, value) for a case-insensitive match."""
    folded = key.casefold()
    for candidate, value in table.items():
        if candidate.casefold() == folded:
            return candidate, value
    return None


def _uk_gov_code(code: str | None) -> ClassificationCode | None:
    if code is None:
        return None
    label = UK_GOV_CLASSIFICATION_LABELS.get(code)
    if label is None:
        return None
    return ClassificationCode(UK_GOVERNMENT_CLASSIFICATION_CODE, code, label)


def _fine_code(value: str | None) -> ClassificationCode | None:
    if value is None:
        return None
    match = _lookup_ignore_case(CLASSIFICATION_LABELS, value)
    if match is None:
        return None
    code, label = match
    return ClassificationCode(CLASSIFICATION_CODE, code, label)


# --------------------------------------------------------------------------- #
#                                 Resolvers                                   #
# --------------------------------------------------------------------------- #


def uk_gov_from_specific(
    attribute: str, mapping: SecurityMapping
) -> ClassificationResolver:
    """Resolve a specific attribute through the inverse security mapping."""

    def resolve(record: SourceRecord) -> ClassificationCode | None:
        value = record.get_string(attribute)
        if value is None:
            return None
        return _uk_gov_code(mapping.inverse_get(value))

    return resolve


def uk_gov_from_overall(record: SourceRecord) -> ClassificationCode | None:
    """Crosswalk the overall classification into the UK government vocabulary."""
    value = record.get_string(Security.CLASSIFICATION)
    if value is None:
        return None
    match = _lookup_ignore_case(CLASSIFICATION_TO_UK_GOV, value)
    if match is None:
        return None
    return _uk_gov_code(match[1])


def originator_from_specific(attribute: str) -> ClassificationResolver:
    """Resolve a specific originator attribute in the fine vocabulary."""

    def resolve(record: SourceRecord) -> ClassificationCode | None:
        return _fine_code(record.get_string(attribute))

    return resolve


def originator_from_overall(record: SourceRecord) -> ClassificationCode | None:
    """Resolve the overall classification in the fine vocabulary."""
    return _fine_code(record.get_string(Security.CLASSIFICATION))


def classification_chain(
    attribute: str, mapping: SecurityMapping
) -> list[ClassificationResolver]:
    """Specific attribute first, then the crosswalked overall classification."""
    return [uk_gov_from_specific(attribute, mapping), uk_gov_from_overall]


def originator_classification_chain(attribute: str) -> list[ClassificationResolver]:
    """Specific originator attribute first, then the overall classification."""
    return [originator_from_specific(attribute), originator_from_overall]


def first_resolved(
    resolvers: Sequence[ClassificationResolver], record: SourceRecord
) -> ClassificationCode | None:
    """Evaluate resolvers in order and return the first code found."""
    for resolver in resolvers:
        code = resolver(record)
        if code is not None:
            return code
    return None
