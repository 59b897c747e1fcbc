"""The filesystem operations the planner and executor are allowed to use.

Everything that touches the disk goes through a ``FileSystem`` so the rename
engine can be driven against an in-memory double in tests.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol


class FileSystem(Protocol):
    """Capability interface consumed by ``build_rename_plan`` and ``execute_plan``."""

    def exists(self, path: Path) -> bool: ...

    def is_dir(self, path: Path) -> bool: ...

    def list_children(self, path: Path) -> Sequence[Path]: ...

    def equivalent(self, a: Path, b: Path) -> bool: ...

    def rename(self, source: Path, destination: Path) -> None: ...


class LocalFileSystem:
    """``FileSystem`` backed by the real disk."""

    def exists(self, path: Path) -> bool:
        # Dangling symlinks still occupy a name.
        return path.exists() or path.is_symlink()

    def is_dir(self, path: Path) -> bool:
        """Return ``True`` for real directories; symlinks are never descended into."""
        return path.is_dir() and not path.is_symlink()

    def list_children(self, path: Path) -> list[Path]:
        """Return the entries of *path* sorted by name.

        Raises ``OSError`` if the directory cannot be read.
        """
        with os.scandir(path) as it:
            names = sorted(entry.name for entry in it)
        return [path / name for name in names]

    def equivalent(self, a: Path, b: Path) -> bool:
        try:
            return os.path.samefile(a, b)
        except OSError:
            return False

    def rename(self, source: Path, destination: Path) -> None:
        """Rename *source* to *destination*, replacing an existing destination.

        Raises ``OSError`` on failure.
        """
        os.replace(source, destination)
