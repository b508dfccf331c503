"""
Document path language.

A path is a slash separated list of segments such as
``/MD_Metadata/language[2]/LanguageCode/@codeList``. Element segments may
carry a 1-based occurrence index; the final segment may address an attribute.
Templates use the ``%index%`` placeholder for repeatable elements.
"""

import re
from dataclasses import dataclass

from mgmp_converter.exceptions import IndexSubstitutionError, PathSyntaxError

INDEX_TAG = "%index%"

_SEGMENT_PATTERN = re.compile(r"^(?P<name>[^\[\]@/]+)(?:\[(?P<index>[^\]]*)\])?$")


@dataclass(frozen=True)
class Segment:
    """A single step of a document path."""

    name: str
    index: int = 1
    is_attribute: bool = False

    @property
    def prefix(self) -> str | None:
        """Namespace prefix of the segment name, if any."""
        if ":" in self.name:
            return self.name.split(":", 1)[0]
        return None

    @property
    def local_name(self) -> str:
        """Segment name without its namespace prefix."""
        return self.name.split(":", 1)[-1]


def substitute_index(template: str, index: int) -> str:
    """
    Replace every index placeholder in a path template.

    Args:
        template: Path template, possibly containing ``%index%``.
        index: 1-based occurrence index.

    Returns:
        The template with each placeholder replaced by ``index``.

    Raises:
        IndexSubstitutionError: If ``index`` is not positive.
    """
    if index <= 0:
        raise IndexSubstitutionError(
            f"Occurrence index must be positive, got {index} for '{template}'"
        )
    return template.replace(INDEX_TAG, str(index))


def parse_path(path: str) -> list[Segment]:
    """
    Split a concrete path into segments.

    Args:
        path: Absolute path with all placeholders substituted.

    Returns:
        The ordered list of segments.

    Raises:
        PathSyntaxError: If the path is not absolute, is empty, still holds a
            placeholder, places an attribute anywhere but last, or carries a
            non-positive index.
    """
    if not path.startswith("/"):
        raise PathSyntaxError("Path must be absolute", path=path)
    if INDEX_TAG in path:
        raise PathSyntaxError("Path still contains an index placeholder", path=path)

    raw_segments = path[1:].split("/")
    if not raw_segments or any(not raw for raw in raw_segments):
        raise PathSyntaxError("Path contains an empty segment", path=path)

    segments: list[Segment] = []
    last = len(raw_segments) - 1
    for position, raw in enumerate(raw_segments):
        if raw.startswith("@"):
            if position != last:
                raise PathSyntaxError(
                    "Attribute segments may only appear last", path=path
                )
            segments.append(Segment(name=raw[1:], is_attribute=True))
            continue

        match = _SEGMENT_PATTERN.match(raw)
        if not match:
            raise PathSyntaxError(f"Malformed segment '{raw}'", path=path)

        index_text = match.group("index")
        index = 1
        if index_text is not None:
            if not index_text.isdigit() or int(index_text) <= 0:
                raise PathSyntaxError(
                    f"Index in segment '{raw}' must be a positive integer", path=path
                )
            index = int(index_text)
        segments.append(Segment(name=match.group("name"), index=index))

    return segments
