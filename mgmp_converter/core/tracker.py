"""Ordered path/value tracker feeding the document assembler."""

import logging
from collections.abc import Iterable

from .path import substitute_index

logger = logging.getLogger(__name__)


class PathValueTracker:
    """
    Accumulates (path, value) assignments in insertion order.

    Re-adding a path replaces its value but keeps the slot it was first
    given, so the order of distinct paths is the order of their first
    assignment. That order becomes the document order.
    """

    def __init__(self) -> None:
        self._assignments: dict[str, str] = {}

    def add(self, path: str, value: str) -> "PathValueTracker":
        """
        Assign a value to a path.

        Args:
            path: Concrete document path.
            value: Text value to write at the path.

        Returns:
            Self for method chaining
        """
        if path in self._assignments:
            logger.debug(f"Overwriting value at '{path}'")
        self._assignments[path] = value
        return self

    def add_multi(
        self, values: Iterable[str], template: str, start_index: int = 1
    ) -> "PathValueTracker":
        """
        Assign each value to consecutive occurrences of a path template.

        An empty ``values`` writes nothing.

        Args:
            values: Values to assign, in order.
            template: Path template containing the index placeholder.
            start_index: Occurrence index given to the first value.

        Returns:
            Self for method chaining
        """
        for offset, value in enumerate(values):
            self.add(substitute_index(template, start_index + offset), value)
        return self

    def all(self) -> list[tuple[str, str]]:
        """Returns the ordered list of assignments."""
        return list(self._assignments.items())

    def get(self, path: str) -> str | None:
        """Returns the value at ``path`` or None."""
        return self._assignments.get(path)

    def paths(self) -> list[str]:
        """Returns the assigned paths in order."""
        return list(self._assignments)

    def __contains__(self, path: object) -> bool:
        return path in self._assignments

    def __len__(self) -> int:
        return len(self._assignments)
