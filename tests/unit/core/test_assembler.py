"""Unit tests for DocumentAssembler."""

from __future__ import annotations

import pytest

from mgmp_converter.core.assembler import DocumentAssembler
from mgmp_converter.exceptions import DocumentAssemblyError, PathSyntaxError

# -------------------- Fakes / helpers --------------------


def child_names(node) -> list[tuple[str, int]]:
    return [(c.name, c.index) for c in node.children]


# --------------------------- Tests ---------------------------


class TestAssemble:
    def test_shared_prefixes_merge(self) -> None:
        root = DocumentAssembler().assemble(
            [
                ("/root/a/b", "1"),
                ("/root/a/c", "2"),
            ],
            "root",
        )
        assert child_names(root) == [("a", 1)]
        a = root.children[0]
        assert child_names(a) == [("b", 1), ("c", 1)]
        assert a.children[0].text == "1"
        assert a.children[1].text == "2"

    def test_sibling_order_is_first_assignment_order(self) -> None:
        root = DocumentAssembler().assemble(
            [
                ("/root/z", "z"),
                ("/root/a", "a"),
                ("/root/z/@attr", "v"),
            ],
            "root",
        )
        assert child_names(root) == [("z", 1), ("a", 1)]
        assert root.children[0].attributes == {"attr": "v"}
        assert root.children[0].text == "z"

    def test_indexed_siblings_are_distinct(self) -> None:
        root = DocumentAssembler().assemble(
            [
                ("/root/item[2]/v", "second"),
                ("/root/item[1]/v", "first"),
                ("/root/item[2]/w", "again"),
            ],
            "root",
        )
        assert child_names(root) == [("item", 2), ("item", 1)]
        assert child_names(root.children[0]) == [("v", 1), ("w", 1)]

    def test_attribute_on_root(self) -> None:
        root = DocumentAssembler().assemble(
            [("/root/@xmlns", "urn:x")], "root"
        )
        assert root.attributes == {"xmlns": "urn:x"}
        assert root.children == []

    def test_last_write_wins_for_text(self) -> None:
        root = DocumentAssembler().assemble(
            [("/root/a", "1"), ("/root/a", "2")], "root"
        )
        assert root.children[0].text == "2"

    def test_empty_value_creates_empty_element(self) -> None:
        root = DocumentAssembler().assemble([("/root/a", "")], "root")
        assert root.children[0].text == ""

    @pytest.mark.parametrize("path", ["/other/a", "/root[2]/a", "/@attr"])
    def test_path_outside_root_raises(self, path: str) -> None:
        with pytest.raises(DocumentAssemblyError):
            DocumentAssembler().assemble([(path, "x")], "root")

    def test_malformed_path_raises(self) -> None:
        with pytest.raises(PathSyntaxError):
            DocumentAssembler().assemble([("/root//a", "x")], "root")

    def test_no_assignments_yield_bare_root(self) -> None:
        root = DocumentAssembler().assemble([], "root")
        assert root.to_dict() == {"name": "root"}
