"""Unit tests for PathValueTracker."""

from __future__ import annotations

import logging

import pytest

from mgmp_converter.core.path import INDEX_TAG
from mgmp_converter.core.tracker import PathValueTracker
from mgmp_converter.exceptions import IndexSubstitutionError

TEMPLATE = f"/root/item[{INDEX_TAG}]/value"

# --------------------------- Tests ---------------------------


class TestAdd:
    def test_preserves_insertion_order(self) -> None:
        tracker = PathValueTracker()
        tracker.add("/root/b", "2").add("/root/a", "1").add("/root/c", "3")
        assert tracker.all() == [("/root/b", "2"), ("/root/a", "1"), ("/root/c", "3")]

    def test_re_add_keeps_first_position_with_latest_value(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.DEBUG)
        tracker = PathValueTracker()
        tracker.add("/root/a", "first").add("/root/b", "x").add("/root/a", "second")

        assert tracker.all() == [("/root/a", "second"), ("/root/b", "x")]
        assert len(tracker) == 2
        assert any("Overwriting value" in r.message for r in caplog.records)

    def test_lookup_helpers(self) -> None:
        tracker = PathValueTracker().add("/root/a", "1")
        assert "/root/a" in tracker
        assert "/root/b" not in tracker
        assert tracker.get("/root/a") == "1"
        assert tracker.get("/root/b") is None
        assert tracker.paths() == ["/root/a"]

    def test_all_returns_a_copy(self) -> None:
        tracker = PathValueTracker().add("/root/a", "1")
        snapshot = tracker.all()
        snapshot.append(("/root/z", "z"))
        assert len(tracker) == 1


class TestAddMulti:
    def test_assigns_consecutive_indices(self) -> None:
        tracker = PathValueTracker().add_multi(["x", "y", "z"], TEMPLATE)
        assert tracker.all() == [
            ("/root/item[1]/value", "x"),
            ("/root/item[2]/value", "y"),
            ("/root/item[3]/value", "z"),
        ]

    def test_custom_start_index(self) -> None:
        tracker = PathValueTracker().add_multi(["x", "y"], TEMPLATE, start_index=4)
        assert tracker.paths() == ["/root/item[4]/value", "/root/item[5]/value"]

    def test_empty_values_write_nothing(self) -> None:
        tracker = PathValueTracker().add_multi([], TEMPLATE)
        assert len(tracker) == 0

    def test_non_positive_start_index_raises(self) -> None:
        with pytest.raises(IndexSubstitutionError):
            PathValueTracker().add_multi(["x"], TEMPLATE, start_index=0)
