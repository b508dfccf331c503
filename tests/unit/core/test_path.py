"""Unit tests for the document path language."""

from __future__ import annotations

import pytest

from mgmp_converter.core.path import INDEX_TAG, Segment, parse_path, substitute_index
from mgmp_converter.exceptions import (
    DocumentAssemblyError,
    IndexSubstitutionError,
    PathSyntaxError,
)

# --------------------------- Tests ---------------------------


class TestSubstituteIndex:
    def test_replaces_every_placeholder(self) -> None:
        template = f"/a/b[{INDEX_TAG}]/c[{INDEX_TAG}]"
        assert substitute_index(template, 3) == "/a/b[3]/c[3]"

    def test_template_without_placeholder_is_unchanged(self) -> None:
        assert substitute_index("/a/b/c", 7) == "/a/b/c"

    @pytest.mark.parametrize("index", [0, -1])
    def test_non_positive_index_is_a_programming_error(self, index: int) -> None:
        with pytest.raises(IndexSubstitutionError):
            substitute_index(f"/a/b[{INDEX_TAG}]", index)

    def test_substitution_error_is_not_a_converter_error(self) -> None:
        with pytest.raises(AssertionError):
            substitute_index(f"/a[{INDEX_TAG}]", 0)


class TestParsePath:
    def test_elements_and_trailing_attribute(self) -> None:
        segments = parse_path("/MD_Metadata/language[2]/LanguageCode/@codeList")
        assert segments == [
            Segment("MD_Metadata"),
            Segment("language", 2),
            Segment("LanguageCode"),
            Segment("codeList", is_attribute=True),
        ]

    def test_missing_index_defaults_to_one(self) -> None:
        segments = parse_path("/root/child")
        assert [s.index for s in segments] == [1, 1]

    def test_prefixed_names_keep_prefix(self) -> None:
        (_, segment) = parse_path("/root/gco:CharacterString")
        assert segment.name == "gco:CharacterString"
        assert segment.prefix == "gco"
        assert segment.local_name == "CharacterString"

    def test_unprefixed_segment_has_no_prefix(self) -> None:
        (segment,) = parse_path("/root")
        assert segment.prefix is None
        assert segment.local_name == "root"

    def test_prefixed_attribute(self) -> None:
        segments = parse_path("/root/gml:Polygon/@gml:id")
        assert segments[-1] == Segment("gml:id", is_attribute=True)

    @pytest.mark.parametrize(
        "path",
        [
            "relative/path",
            "",
            "/root//child",
            "/root/child/",
            "/root/@attr/child",
            "/root/child[0]",
            "/root/child[x]",
            "/root/child[]",
            f"/root/child[{INDEX_TAG}]",
        ],
    )
    def test_malformed_paths_raise(self, path: str) -> None:
        with pytest.raises(PathSyntaxError):
            parse_path(path)

    def test_syntax_error_carries_path_context(self) -> None:
        with pytest.raises(DocumentAssemblyError) as exc_info:
            parse_path("/root//child")
        assert exc_info.value.context["path"] == "/root//child"
        assert "DOCUMENT_ASSEMBLY_ERROR" in str(exc_info.value)
