import logging
from abc import ABC, abstractmethod

from lxml import etree

from mgmp_converter.models.document import DocumentNode, DocumentSerializer
from mgmp_converter.models.record import SourceRecord

from ..assembler import DocumentAssembler
from ..protocols import RecordConverter
from ..tracker import PathValueTracker

logger = logging.getLogger(__name__)


class BaseTreeConverter(RecordConverter, ABC):
    """
    Base class for converters that write a record as an XML document.

    Provides the common flow of building the ordered assignments, assembling
    them into a tree and serializing it, keeping the dialect-specific field
    mapping abstracted.

    Subclasses must implement:
    - root_node_name(): Name of the document root element.
    - build_paths(): The ordered field mapping for one record.
    """

    def __init__(self):
        self._logger = logger.getChild(self.__class__.__name__)
        self._assembler = DocumentAssembler()
        self._serializer = DocumentSerializer()

    def to_document(self, record: SourceRecord) -> DocumentNode:
        """
        Convert a record into a document tree.

        1. Calls the abstract method `build_paths` to obtain assignments.
        2. Assembles them, in order, under the root element.
        """
        self._logger.info("Starting record conversion.")
        tracker = self.build_paths(record)
        document = self._assembler.assemble(tracker.all(), self.root_node_name())
        self._logger.info(f"Record conversion completed ({len(tracker)} paths).")
        return document

    def to_element(self, record: SourceRecord) -> etree._Element:
        """Convert a record into an lxml element tree."""
        return self._serializer.to_element(self.to_document(record))

    def to_xml(self, record: SourceRecord, pretty_print: bool = True) -> str:
        """Convert a record into an XML string."""
        return self._serializer.to_string(
            self.to_document(record), pretty_print=pretty_print
        )

    def to_bytes(self, record: SourceRecord, pretty_print: bool = True) -> bytes:
        """Convert a record into UTF-8 encoded XML with a declaration."""
        return self._serializer.to_bytes(
            self.to_document(record), pretty_print=pretty_print
        )

    # --- Abstract Methods (Dialect-Specific Logic) ---

    @abstractmethod
    def root_node_name(self) -> str:
        """Name of the document root element."""
        pass

    @abstractmethod
    def build_paths(self, record: SourceRecord) -> PathValueTracker:
        """
        Dialect-specific field mapping.

        Args:
            record: The record to convert.

        Returns:
            A tracker holding the ordered (path, value) assignments.
        """
        pass
