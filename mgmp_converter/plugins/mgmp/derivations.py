"""
Pure helpers deriving MGMP field values from record values.

Geometry reduction, temporal pairing, identifier segmentation, date and
number formatting, and caveat composition.
"""

import datetime
import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import pytz
import shapely
from shapely import wkt as shapely_wkt
from shapely.errors import ShapelyError

from mgmp_converter.exceptions import GeometryParseError

from .constants import LANGUAGE_DISPLAY_NAMES

logger = logging.getLogger(__name__)

BOUNDING_BOX_FORMAT = "%.15f"

_ID_PATTERN = re.compile(r"^.{32}$", re.DOTALL)
_ID_SEGMENTS = ((0, 8), (8, 12), (12, 16), (16, 20), (20, 32))
ID_SEPARATOR = "-"


@dataclass(frozen=True)
class BoundingBox:
    """Min/max rectangle of a geometry plus its flattened vertex list."""

    west: float | None
    east: float | None
    south: float | None
    north: float | None
    coordinates: tuple[tuple[float, float], ...]

    @property
    def is_complete(self) -> bool:
        """True when all four bounds could be computed."""
        return None not in (self.west, self.east, self.south, self.north)

    def pos_list(self) -> str:
        """Vertices as ``x1 y1 x2 y2 ...`` in parser order."""
        return " ".join(
            f"{format_decimal(x)} {format_decimal(y)}" for x, y in self.coordinates
        )


@dataclass(frozen=True)
class TemporalExtent:
    """One start/end pair placed at a temporal element index."""

    index: int
    start: str
    end: str

    @property
    def is_instant(self) -> bool:
        return self.start == self.end


def format_id(identifier: str) -> str:
    """
    Segment a 32 character identifier as 8-4-4-4-12.

    Any other length is returned unchanged.
    """
    if not _ID_PATTERN.match(identifier):
        return identifier
    return ID_SEPARATOR.join(identifier[start:end] for start, end in _ID_SEGMENTS)


def date_to_iso8601(value: datetime.datetime) -> str:
    """
    Render a datetime as extended ISO 8601 in UTC with millisecond precision.

    Naive datetimes are taken to be UTC already.
    """
    if value.tzinfo is None:
        utc_value = pytz.utc.localize(value)
    else:
        utc_value = value.astimezone(pytz.utc)
    millis = utc_value.microsecond // 1000
    return (
        f"{utc_value.year:04d}-{utc_value.strftime('%m-%dT%H:%M:%S')}"
        f".{millis:03d}Z"
    )


def format_bbox_coordinate(value: float) -> str:
    """Bounding box coordinates carry exactly 15 fractional digits."""
    return BOUNDING_BOX_FORMAT % value


def format_decimal(value: float) -> str:
    """Shortest round-trip text of a float, always with a decimal point."""
    return repr(float(value))


def display_language(code: str) -> str:
    """English display name of an ISO 639 code, or the code itself."""
    return LANGUAGE_DISPLAY_NAMES.get(code.lower(), code)


def bounding_box_from_wkt(location: str) -> BoundingBox:
    """
    Parse a WKT geometry and reduce its vertices to a bounding box.

    Args:
        location: Well-known text, e.g. ``POLYGON ((0 0, 10 0, 10 10, 0 0))``.

    Returns:
        The bounding box. Bounds are None only for an empty geometry.

    Raises:
        GeometryParseError: If the text is not valid WKT.
    """
    try:
        geometry = shapely_wkt.loads(location)
    except (ShapelyError, ValueError, TypeError) as exc:
        raise GeometryParseError(f"Unable to parse WKT: {exc}", wkt=location) from exc

    coordinates = tuple(
        (float(x), float(y)) for x, y in shapely.get_coordinates(geometry).tolist()
    )
    xs = [x for x, _ in coordinates]
    ys = [y for _, y in coordinates]

    return BoundingBox(
        west=min(xs, default=None),
        east=max(xs, default=None),
        south=min(ys, default=None),
        north=max(ys, default=None),
        coordinates=coordinates,
    )


def pair_temporal_extents(
    starts: Sequence[str], ends: Sequence[str]
) -> list[TemporalExtent]:
    """
    Pair start and end timestamps by position.

    Mismatched lengths yield no extents at all. Each pair takes the next
    index, starting at 1, whether it renders as an instant or a period.
    """
    if len(starts) != len(ends):
        logger.debug(
            f"Skipping temporal extents: {len(starts)} start(s), {len(ends)} end(s)"
        )
        return []
    return [
        TemporalExtent(index=position, start=start, end=end)
        for position, (start, end) in enumerate(zip(starts, ends), start=1)
    ]


def compose_caveat(dissemination: Any, releasability: Sequence[Any]) -> str | None:
    """
    Compose ``"<dissemination> <r1>/<r2>/..."``.

    Returns None unless the dissemination is a non-blank string and at least
    one releasability value is present.
    """
    if not isinstance(dissemination, str) or not dissemination.strip():
        return None
    if not releasability:
        return None
    return f"{dissemination} {'/'.join(str(value) for value in releasability)}"
