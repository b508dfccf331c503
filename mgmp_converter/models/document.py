import logging
import re
from typing import Any

from lxml import etree

from mgmp_converter.exceptions import DocumentAssemblyError

logger = logging.getLogger(__name__)

XMLNS = "xmlns"

# characters outside the XML 1.0 Char production
_XML_INVALID_CHARS = re.compile(
    "[^\u0009\u000a\u000d\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


def xml_safe(value: str) -> str:
    """Drop the characters an XML 1.0 document cannot carry."""
    cleaned = _XML_INVALID_CHARS.sub("", value)
    if cleaned != value:
        logger.debug(
            f"Dropped {len(value) - len(cleaned)} character(s) not allowed in XML"
        )
    return cleaned


class DocumentNode:
    """A node of the assembled document tree.

    Children are kept in creation order and addressed by ``(name, index)``;
    attributes are kept in first-assignment order.
    """

    def __init__(self, name: str, index: int = 1):
        self.name = name
        self.index = index
        self.text: str | None = None
        self.attributes: dict[str, str] = {}
        self.children: list["DocumentNode"] = []

    def find_child(self, name: str, index: int = 1) -> "DocumentNode | None":
        """Returns the child with the given name and occurrence index, or None"""
        for child in self.children:
            if child.name == name and child.index == index:
                return child
        return None

    def child(self, name: str, index: int = 1) -> "DocumentNode":
        """Returns the matching child, appending a new one if none exists"""
        existing = self.find_child(name, index)
        if existing is not None:
            return existing
        node = DocumentNode(name, index)
        self.children.append(node)
        return node

    def with_attribute(self, name: str, value: str) -> "DocumentNode":
        """Sets an attribute, keeping its original position on overwrite"""
        self.attributes[name] = value
        return self

    def with_text(self, text: str) -> "DocumentNode":
        """Sets the text content"""
        self.text = text
        return self

    def namespace_declarations(self) -> dict[str | None, str]:
        """Returns the ``xmlns`` declarations held as attributes of this node"""
        declarations: dict[str | None, str] = {}
        for attr_name, value in self.attributes.items():
            if attr_name == XMLNS:
                declarations[None] = value
            elif attr_name.startswith(XMLNS + ":"):
                declarations[attr_name.split(":", 1)[1]] = value
        return declarations

    def to_dict(self) -> dict[str, Any]:
        """Plain nested representation, handy for debugging and tests"""
        data: dict[str, Any] = {"name": self.name}
        if self.attributes:
            data["attributes"] = dict(self.attributes)
        if self.text is not None:
            data["text"] = self.text
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data

    def __repr__(self) -> str:
        return (
            f"DocumentNode(name={self.name!r}, index={self.index}, "
            f"children={len(self.children)})"
        )


class DocumentSerializer:
    """Turns a DocumentNode tree into an lxml element tree and serializes it."""

    def to_element(self, root: DocumentNode) -> etree._Element:
        """
        Build the lxml element for ``root`` and all its descendants.

        Raises:
            DocumentAssemblyError: If a prefix is used without a declaration.
        """
        return self._build(root, None, {})

    def to_string(self, root: DocumentNode, pretty_print: bool = True) -> str:
        """Serialize the tree to a unicode string without XML declaration"""
        return etree.tostring(
            self.to_element(root), encoding="unicode", pretty_print=pretty_print
        )

    def to_bytes(self, root: DocumentNode, pretty_print: bool = True) -> bytes:
        """Serialize the tree to UTF-8 bytes with an XML declaration"""
        return etree.tostring(
            self.to_element(root),
            encoding="UTF-8",
            xml_declaration=True,
            pretty_print=pretty_print,
        )

    def _build(
        self,
        node: DocumentNode,
        parent: etree._Element | None,
        scope: dict[str | None, str],
    ) -> etree._Element:
        declarations = node.namespace_declarations()
        scope = {**scope, **declarations}
        qname = self._qualify(node.name, scope, is_attribute=False)

        if parent is None:
            element = etree.Element(qname, nsmap=declarations or None)
        else:
            element = etree.SubElement(parent, qname, nsmap=declarations or None)

        for attr_name, value in node.attributes.items():
            if attr_name == XMLNS or attr_name.startswith(XMLNS + ":"):
                continue
            element.set(
                self._qualify(attr_name, scope, is_attribute=True), xml_safe(value)
            )

        if node.text is not None:
            element.text = xml_safe(node.text)

        for child in node.children:
            self._build(child, element, scope)

        return element

    @staticmethod
    def _qualify(
        name: str, scope: dict[str | None, str], is_attribute: bool
    ) -> str:
        if ":" in name:
            prefix, local_name = name.split(":", 1)
            uri = scope.get(prefix)
            if uri is None:
                raise DocumentAssemblyError(
                    f"Namespace prefix '{prefix}' is not declared", path=name
                )
            return f"{{{uri}}}{local_name}"

        # unprefixed attributes are never in a namespace
        if is_attribute:
            return name

        default_uri = scope.get(None)
        if default_uri:
            return f"{{{default_uri}}}{name}"
        return name
