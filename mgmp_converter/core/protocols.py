from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from mgmp_converter.core.tracker import PathValueTracker
    from mgmp_converter.models.record import SourceRecord


class MappingStep(Protocol):
    """Defines the contract for one unit of the field mapping pipeline."""

    def __call__(
        self,
        record: "SourceRecord",
        tracker: "PathValueTracker",
        context: Any,
    ) -> None:
        """
        Read attributes from the record and write assignments.

        Args:
            record: The record being converted. Never mutated.
            tracker: Receives the (path, value) assignments.
            context: Per-conversion state shared by all steps of one run.
        """
        ...


class RecordConverter(Protocol):
    """Defines the contract for turning a record into path assignments."""

    def root_node_name(self) -> str:
        """Returns the name of the document root element."""
        ...

    def build_paths(self, record: "SourceRecord") -> "PathValueTracker":
        """Runs the mapping pipeline and returns the populated tracker."""
        ...
