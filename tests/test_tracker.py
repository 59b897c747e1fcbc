"""Tests for the tracker module — rename history and path resolution."""

from __future__ import annotations

from pathlib import Path

from ascii_rename.tracker import PathTracker, RenamePair


class TestResolve:
    def test_empty_history(self) -> None:
        tracker = PathTracker()
        assert tracker.resolve(Path("/a/b")) == Path("/a/b")

    def test_exact_match(self) -> None:
        tracker = PathTracker()
        tracker.record(Path("/a/é"), Path("/a/e"))
        assert tracker.resolve(Path("/a/é")) == Path("/a/e")

    def test_descendant_rewritten(self) -> None:
        tracker = PathTracker()
        tracker.record(Path("répertoire"), Path("repertoire"))
        assert tracker.resolve(Path("répertoire/sous/f.txt")) == Path("repertoire/sous/f.txt")

    def test_component_boundary(self) -> None:
        """A rename of /ab must not touch /abc."""
        tracker = PathTracker()
        tracker.record(Path("/ab"), Path("/xy"))
        assert tracker.resolve(Path("/abc/d")) == Path("/abc/d")

    def test_unrelated_path_unchanged(self) -> None:
        tracker = PathTracker()
        tracker.record(Path("a/b"), Path("a/c"))
        assert tracker.resolve(Path("a/bb")) == Path("a/bb")
        assert tracker.resolve(Path("a")) == Path("a")

    def test_cumulative_renames(self) -> None:
        """Grandparent renamed, then the (already moved) parent renamed."""
        tracker = PathTracker()
        tracker.record(Path("ä"), Path("a"))
        tracker.record(Path("a/ö"), Path("a/o"))
        assert tracker.resolve(Path("ä/ö/ü.txt")) == Path("a/o/ü.txt")

    def test_order_sensitive(self) -> None:
        tracker = PathTracker()
        tracker.record(Path("a/ö"), Path("a/o"))
        tracker.record(Path("ä"), Path("a"))
        # The first pair no longer matches once the second has been applied.
        assert tracker.resolve(Path("ä/ö")) == Path("a/ö")

    def test_idempotent(self) -> None:
        tracker = PathTracker()
        tracker.record(Path("x/é"), Path("x/e"))
        tracker.record(Path("ü"), Path("u"))
        for path in (Path("x/é/f"), Path("ü/g"), Path("other")):
            once = tracker.resolve(path)
            assert tracker.resolve(once) == once

    def test_relative_and_absolute_distinct(self) -> None:
        tracker = PathTracker()
        tracker.record(Path("é"), Path("e"))
        assert tracker.resolve(Path("/é")) == Path("/é")


class TestRecord:
    def test_history_append_only(self) -> None:
        tracker = PathTracker()
        tracker.record(Path("a"), Path("b"))
        tracker.record(Path("a"), Path("c"))
        assert tracker.history == (
            RenamePair(Path("a"), Path("b")),
            RenamePair(Path("a"), Path("c")),
        )

    def test_history_is_a_snapshot(self) -> None:
        tracker = PathTracker()
        before = tracker.history
        tracker.record(Path("a"), Path("b"))
        assert before == ()
        assert len(tracker.history) == 1
