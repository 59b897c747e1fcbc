"""Resolution of planned paths against renames that have already happened."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class RenamePair:
    """A committed (or simulated) rename."""

    source: Path
    destination: Path


@dataclass
class PathTracker:
    """Append-only rename history for one run.

    ``resolve`` rewrites a path whose ancestors were renamed earlier in the
    run into its current on-disk form.  Matching is component-wise, so a
    rename of ``/ab`` never affects ``/abc``.
    """

    _history: list[RenamePair] = field(default_factory=list)

    @property
    def history(self) -> tuple[RenamePair, ...]:
        return tuple(self._history)

    def record(self, source: Path, destination: Path) -> None:
        self._history.append(RenamePair(source, destination))

    def resolve(self, path: Path) -> Path:
        """Apply every recorded rename, in order, to the prefix of *path*."""
        result = path
        for pair in self._history:
            if result.is_relative_to(pair.source):
                result = pair.destination.joinpath(*result.parts[len(pair.source.parts) :])
        return result
