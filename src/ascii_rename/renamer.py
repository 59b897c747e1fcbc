"""Plan execution and human-readable progress formatting."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from .filesystem import FileSystem, LocalFileSystem
from .sanitizer import DEFAULT_REPLACE_CHAR, ascii_name, validate_replace_char
from .scanner import RenamePlan
from .tracker import PathTracker
from .transliterator import TransliterationFailed


class OutcomeKind(enum.Enum):
    """What happened to a single planned operation."""

    RENAMED = "renamed"
    WOULD_RENAME = "would_rename"
    UNCHANGED = "unchanged"
    VANISHED = "vanished"
    TRANSLITERATION_FAILED = "transliteration_failed"
    COLLISION = "collision"
    FILESYSTEM_ERROR = "filesystem_error"

    @property
    def is_rename(self) -> bool:
        return self in (OutcomeKind.RENAMED, OutcomeKind.WOULD_RENAME)

    @property
    def is_skip(self) -> bool:
        """Return ``True`` for outcomes that count towards the exit code."""
        return self in (
            OutcomeKind.TRANSLITERATION_FAILED,
            OutcomeKind.COLLISION,
            OutcomeKind.FILESYSTEM_ERROR,
        )


@dataclass(frozen=True)
class RenameOutcome:
    """Result of processing one ``RenameOp``."""

    kind: OutcomeKind
    source: Path
    destination: Path | None = None
    error_message: str | None = None


@dataclass
class RenameReport:
    """All outcomes of one run, plus the rename history it produced."""

    outcomes: list[RenameOutcome] = field(default_factory=list)
    tracker: PathTracker = field(default_factory=PathTracker)

    @property
    def renamed(self) -> int:
        return sum(1 for o in self.outcomes if o.kind.is_rename)

    @property
    def skipped(self) -> int:
        return sum(1 for o in self.outcomes if o.kind.is_skip)

    @property
    def total(self) -> int:
        return self.renamed + self.skipped


OutcomeCallback = Callable[[RenameOutcome], None]


def execute_plan(
    plan: RenamePlan,
    *,
    noop: bool = False,
    overwrite: bool = False,
    replace_char: str = DEFAULT_REPLACE_CHAR,
    fs: FileSystem | None = None,
    on_outcome: OutcomeCallback | None = None,
) -> RenameReport:
    """Process every operation in *plan*, in order.

    For each operation:
      1. Resolve its source through the renames already made.
      2. Skip it if the resolved path no longer exists.
      3. Compute the ASCII, shell-safe name; skip if the name is unchanged.
      4. Refuse to replace an existing, different entry unless *overwrite*.
      5. Rename (or, with *noop*, only pretend to) and record the rename.

    Errors are recorded but do not stop execution of remaining operations.

    Args:
        plan: The plan built by ``build_rename_plan``.
        noop: Report what would happen without touching the filesystem.
        overwrite: Replace existing destinations.
        replace_char: Placeholder for shell metacharacters.
        fs: Filesystem to operate on (defaults to the local disk).
        on_outcome: Called with each outcome as soon as it is known.

    Returns:
        A ``RenameReport`` with one outcome per operation.

    Raises:
        ValueError: If *replace_char* is not a usable placeholder.
    """
    validate_replace_char(replace_char)
    if fs is None:
        fs = LocalFileSystem()

    report = RenameReport()
    tracker = report.tracker

    def emit(outcome: RenameOutcome) -> None:
        report.outcomes.append(outcome)
        if on_outcome is not None:
            on_outcome(outcome)

    for op in plan.operations:
        current = tracker.resolve(op.source)

        if not fs.exists(current):
            emit(RenameOutcome(OutcomeKind.VANISHED, current))
            continue

        converted = ascii_name(current.name, replace_char)
        if isinstance(converted, TransliterationFailed):
            emit(
                RenameOutcome(
                    OutcomeKind.TRANSLITERATION_FAILED,
                    current,
                    error_message=converted.reason,
                )
            )
            continue

        destination = current.with_name(converted.text)
        if str(destination) == str(current):
            emit(RenameOutcome(OutcomeKind.UNCHANGED, current))
            continue

        if not overwrite and fs.exists(destination) and not fs.equivalent(current, destination):
            emit(
                RenameOutcome(
                    OutcomeKind.COLLISION,
                    current,
                    destination,
                    error_message=f"Destination already exists: {destination}",
                )
            )
            continue

        if noop:
            tracker.record(current, destination)
            emit(RenameOutcome(OutcomeKind.WOULD_RENAME, current, destination))
            continue

        try:
            fs.rename(current, destination)
        except OSError as exc:
            emit(
                RenameOutcome(
                    OutcomeKind.FILESYSTEM_ERROR,
                    current,
                    destination,
                    error_message=str(exc),
                )
            )
            continue

        tracker.record(current, destination)
        emit(RenameOutcome(OutcomeKind.RENAMED, current, destination))

    return report


def format_outcome(outcome: RenameOutcome, *, verbose: bool = False) -> tuple[list[str], list[str]]:
    """Format *outcome* as ``(stdout_lines, stderr_lines)``."""
    out: list[str] = []
    err: list[str] = []
    kind = outcome.kind
    source = outcome.source
    destination = outcome.destination

    if verbose:
        out.append(f'Processing "{source}"...')

    if kind == OutcomeKind.VANISHED:
        if verbose:
            out.append(f'Path no longer exists, skipping "{source}"...')
    elif kind == OutcomeKind.UNCHANGED:
        if verbose:
            out.append(f'No need to rename "{source}".')
    elif kind == OutcomeKind.TRANSLITERATION_FAILED:
        err.append(f'ERROR: Unable convert "{source.name}" to ASCII, skipping.')
    elif kind == OutcomeKind.COLLISION:
        err.append(f'ERROR: "{destination}" already exists.')
        err.append("ERROR: Specify --overwrite to overwrite.")
    elif kind == OutcomeKind.WOULD_RENAME:
        out.append(f'Would have renamed "{source}" to "{destination}"...')
    else:
        # RENAMED and FILESYSTEM_ERROR both announce the attempt.
        out.append(f'Renaming "{source}" to "{destination}"...')
        if kind == OutcomeKind.FILESYSTEM_ERROR:
            err.append(
                f'ERROR: File system error, unable to rename "{source}" to "{destination}".'
            )

    if verbose and outcome.error_message and kind != OutcomeKind.COLLISION:
        err.append(f"ERROR: {outcome.error_message}")

    return out, err


def format_plan_summary(plan: RenamePlan) -> str:
    """Return the verbose line announcing how much work the plan holds."""
    return f"Collected {len(plan)} path components to process."


def format_summary(report: RenameReport) -> str:
    """Return the final verbose ``Renamed: X, Skipped: Y, Total: Z`` line."""
    return f"Renamed: {report.renamed}, Skipped: {report.skipped}, Total: {report.total}"
