"""Shared fixtures: an in-memory ``FileSystem`` for policy tests."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import pytest


class FakeFileSystem:
    """In-memory filesystem.

    Entries are given as relative POSIX-style strings; a trailing ``/`` marks a
    directory and every ancestor of an entry is created as a directory.  With
    *case_insensitive*, lookups fold case the way macOS and Windows do.
    """

    def __init__(
        self,
        entries: Iterable[str],
        *,
        case_insensitive: bool = False,
        fail_on: Iterable[str] = (),
        unreadable: Iterable[str] = (),
    ) -> None:
        self.case_insensitive = case_insensitive
        self.fail_on = {self._key(Path(p)) for p in fail_on}
        self.unreadable = {self._key(Path(p)) for p in unreadable}
        self.renames: list[tuple[Path, Path]] = []
        # key -> (actual path, is_dir)
        self._entries: dict[str, tuple[Path, bool]] = {}
        for entry in entries:
            path = Path(entry)
            self._add(path, is_dir=entry.endswith("/"))
            for parent in path.parents:
                if parent != Path("."):
                    self._add(parent, is_dir=True)

    def _key(self, path: Path) -> str:
        text = path.as_posix()
        return text.casefold() if self.case_insensitive else text

    def _add(self, path: Path, *, is_dir: bool) -> None:
        key = self._key(path)
        if key in self._entries:
            is_dir = is_dir or self._entries[key][1]
        self._entries[key] = (path, is_dir)

    @property
    def paths(self) -> set[str]:
        """Actual spelling of every entry."""
        return {path.as_posix() for path, _ in self._entries.values()}

    def exists(self, path: Path) -> bool:
        return self._key(path) in self._entries

    def is_dir(self, path: Path) -> bool:
        entry = self._entries.get(self._key(path))
        return entry is not None and entry[1]

    def list_children(self, path: Path) -> list[Path]:
        key = self._key(path)
        if key in self.unreadable:
            raise PermissionError(13, "Permission denied", str(path))
        children = [p for p, _ in self._entries.values() if self._key(p.parent) == key]
        return sorted(children)

    def equivalent(self, a: Path, b: Path) -> bool:
        return self.exists(a) and self._key(a) == self._key(b)

    def rename(self, source: Path, destination: Path) -> None:
        src_key = self._key(source)
        if src_key in self.fail_on:
            raise PermissionError(13, "Permission denied", str(source))
        if src_key not in self._entries:
            raise FileNotFoundError(2, "No such file or directory", str(source))

        actual, _ = self._entries[src_key]
        moving = {
            key: value
            for key, value in self._entries.items()
            if key == src_key or key.startswith(src_key + "/")
        }
        for key in moving:
            del self._entries[key]
        self._entries.pop(self._key(destination), None)
        for path, is_dir in moving.values():
            self._add(destination.joinpath(*path.parts[len(actual.parts) :]), is_dir=is_dir)
        self.renames.append((source, destination))


@pytest.fixture
def in_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test with *tmp_path* as the working directory, for relative inputs."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
