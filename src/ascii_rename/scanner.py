"""Expansion of user-supplied paths into an ordered, deduplicated rename plan.

Every ancestor of an input path is a rename candidate, not just the leaf:
``café/naïve.txt`` plans both ``café/naïve.txt`` and ``café``.  Candidates
from all inputs are merged and ordered deepest first, so an entry is always
renamed before the directory that contains it.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import TypeVar

from .filesystem import FileSystem, LocalFileSystem

P = TypeVar("P", bound=PurePath)

_ROOT_MARKERS: frozenset[str] = frozenset({"/", "\\"})
_RELATIVE_MARKERS: frozenset[str] = frozenset({".", ".."})


@dataclass(frozen=True)
class RenameOp:
    """A path component that may need renaming.

    Two operations are equal when their ``source`` is equal; ``depth`` only
    decides processing order.
    """

    source: Path
    depth: int = field(compare=False)


@dataclass(frozen=True)
class PendingInput:
    """A path waiting to be expanded; ``expanded`` is set once its children are queued."""

    path: Path
    expanded: bool = False


@dataclass
class RenamePlan:
    """Ordered rename operations for a set of input paths."""

    operations: list[RenameOp] = field(default_factory=list)
    missing_inputs: list[Path] = field(default_factory=list)
    unreadable_dirs: list[tuple[Path, str]] = field(default_factory=list)
    inputs_scanned: int = 0

    def __len__(self) -> int:
        return len(self.operations)

    @property
    def has_operations(self) -> bool:
        """Return ``True`` if there is anything to process."""
        return bool(self.operations)


def _is_structural(part: str) -> bool:
    """Return ``True`` for segments that can never be renamed."""
    if part in _ROOT_MARKERS or part in _RELATIVE_MARKERS:
        return True
    # Drive letters, e.g. "C:".
    return len(part) == 2 and part[0].isalpha() and part[1] == ":"


def renameable_components(path: P) -> list[P]:
    """Return every renameable ancestor-inclusive prefix of *path*, deepest first.

    Root markers, drive letters, ``.`` and ``..`` become part of the running
    prefix but are never returned themselves.  A bare root yields ``[]``.
    """
    components: list[P] = []
    current = type(path)()
    for index, part in enumerate(path.parts):
        current = current / part
        # Anchors such as "C:\\" or "\\\\host\\share\\" are a single part.
        if index == 0 and part == path.anchor:
            continue
        if not _is_structural(part):
            components.append(current)
    components.reverse()
    return components


def trim_trailing_separators(raw: str) -> str:
    """Strip trailing ``/`` and ``\\`` from *raw*, keeping a bare root intact."""
    trimmed = raw.rstrip("/\\")
    if not trimmed:
        return raw[:1]
    if len(trimmed) == 2 and trimmed[1] == ":" and len(raw) > 2:
        # "C:\\" is a root; "C:" alone is relative to the drive's cwd.
        return raw[:3]
    return trimmed


def _expand(pending: PendingInput, fs: FileSystem, plan: RenamePlan) -> list[PendingInput]:
    """Queue the children of a directory, followed by the directory itself."""
    try:
        children = fs.list_children(pending.path)
    except OSError as exc:
        plan.unreadable_dirs.append((pending.path, str(exc)))
        children = []
    return [*(PendingInput(c) for c in children), PendingInput(pending.path, expanded=True)]


def build_rename_plan(
    paths: Iterable[str | Path],
    *,
    recursive: bool = False,
    fs: FileSystem | None = None,
) -> RenamePlan:
    """Expand *paths* into a single ordered ``RenamePlan``.

    With *recursive*, every directory input contributes its whole subtree.
    Paths that do not exist are recorded in ``missing_inputs`` and contribute
    no candidates.

    Args:
        paths: User-supplied paths, in command-line order.
        recursive: Whether to descend into directories.
        fs: Filesystem to query (defaults to the local disk).

    Returns:
        A ``RenamePlan`` whose operations are sorted by depth, deepest first,
        with each source path appearing once.
    """
    if fs is None:
        fs = LocalFileSystem()

    plan = RenamePlan()
    collected: list[RenameOp] = []

    # Stack of inputs; the first user path is processed first.
    stack: list[PendingInput] = [
        PendingInput(Path(trim_trailing_separators(str(p)))) for p in reversed(list(paths))
    ]

    while stack:
        pending = stack.pop()

        if not fs.exists(pending.path):
            plan.missing_inputs.append(pending.path)
            continue

        if recursive and not pending.expanded and fs.is_dir(pending.path):
            # Pushed in reverse so children pop in name order, then the directory.
            stack.extend(reversed(_expand(pending, fs, plan)))
            continue

        plan.inputs_scanned += 1
        components = renameable_components(pending.path)
        count = len(components)
        collected.extend(RenameOp(c, count - i) for i, c in enumerate(components))

    seen: set[RenameOp] = set()
    for op in sorted(collected, key=lambda op: op.depth, reverse=True):
        if op in seen:
            continue
        seen.add(op)
        plan.operations.append(op)

    return plan
