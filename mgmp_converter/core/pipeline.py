"""Ordered mapping pipeline and the scalar step shape it is built from."""

import logging
from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from mgmp_converter.models.record import SourceRecord

from .protocols import MappingStep
from .tracker import PathValueTracker

logger = logging.getLogger(__name__)


class StepResult(Enum):
    """Outcome of a scalar mapping step."""

    WRITTEN = "written"
    SKIPPED = "skipped"

    @property
    def written(self) -> bool:
        return self is StepResult.WRITTEN


def add_field_if_present(
    tracker: PathValueTracker,
    value: Any,
    path: str,
    extra: Callable[[], None] | None = None,
) -> StepResult:
    """
    Write ``value`` at ``path`` when it is a string, then run its companion.

    The companion ``extra`` runs only when the value was written; it cannot
    fire on its own.

    Args:
        tracker: Receives the assignment.
        value: Candidate value; anything that is not a str is skipped.
        path: Concrete document path.
        extra: Optional companion step run after a successful write.

    Returns:
        StepResult.WRITTEN or StepResult.SKIPPED
    """
    if not isinstance(value, str):
        return StepResult.SKIPPED
    tracker.add(path, value)
    if extra is not None:
        extra()
    return StepResult.WRITTEN


class MappingPipeline:
    """
    Runs named mapping steps in a fixed order.

    Step order is part of the output contract: the assembler keeps the order
    in which paths were first assigned.
    """

    def __init__(self, steps: list[tuple[str, MappingStep]] | None = None):
        """
        Initialize the pipeline.

        Args:
            steps: (name, step) pairs to execute in order
        """
        self._logger = logger.getChild(self.__class__.__name__)
        self._steps: list[tuple[str, MappingStep]] = list(steps or [])

    def add_step(self, name: str, step: MappingStep) -> "MappingPipeline":
        """
        Append a step to the pipeline.

        Returns:
            Self for method chaining
        """
        self._steps.append((name, step))
        return self

    def get_step_names(self) -> list[str]:
        """Returns the step names in execution order."""
        return [name for name, _ in self._steps]

    def run(
        self,
        record: "SourceRecord",
        tracker: PathValueTracker,
        context: Any,
    ) -> PathValueTracker:
        """
        Execute every step against one record.

        Returns:
            The tracker, populated by all steps
        """
        for name, step in self._steps:
            before = len(tracker)
            step(record, tracker, context)
            self._logger.debug(
                f"Step '{name}' wrote {len(tracker) - before} new path(s)"
            )
        return tracker
