"""Builds a document tree from an ordered list of path assignments."""

import logging
from collections.abc import Iterable

from mgmp_converter.exceptions import DocumentAssemblyError
from mgmp_converter.models.document import DocumentNode

from .path import parse_path

logger = logging.getLogger(__name__)


class DocumentAssembler:
    """
    Walks assignments in order and merges them into a single tree.

    Element segments descend into the child with the same name and index or
    append a new one; the final segment either sets an attribute or the text
    of the addressed node. Nothing is sorted or normalised, so sibling order
    is the order in which each path prefix was first assigned.
    """

    def __init__(self):
        self._logger = logger.getChild(self.__class__.__name__)

    def assemble(
        self, assignments: Iterable[tuple[str, str]], root_name: str
    ) -> DocumentNode:
        """
        Build the document tree.

        Args:
            assignments: Ordered (path, value) pairs.
            root_name: Name of the root element every path must start with.

        Returns:
            The root DocumentNode.

        Raises:
            DocumentAssemblyError: If a path is malformed or does not start at
                the root element.
        """
        root = DocumentNode(root_name)
        count = 0

        for path, value in assignments:
            segments = parse_path(path)
            head, rest = segments[0], segments[1:]
            if head.is_attribute or head.name != root_name or head.index != 1:
                raise DocumentAssemblyError(
                    f"Path does not start at root element '{root_name}'", path=path
                )

            node = root
            for segment in rest:
                if segment.is_attribute:
                    node.with_attribute(segment.name, value)
                    break
                node = node.child(segment.name, segment.index)
            else:
                node.with_text(value)
            count += 1

        self._logger.debug(f"Assembled document from {count} assignments")
        return root
