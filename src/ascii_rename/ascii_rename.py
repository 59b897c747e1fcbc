"""Public API — re-exports all public symbols from the package.

The package ``__init__.py`` re-exports everything from here via
``from .ascii_rename import *``.
"""

from __future__ import annotations

from ._version import __version__

# CLI entry point
from .cli import main

# Filesystem capability
from .filesystem import FileSystem, LocalFileSystem

# Renamer — plan execution and progress formatting
from .renamer import (
    OutcomeKind,
    RenameOutcome,
    RenameReport,
    execute_plan,
    format_outcome,
    format_plan_summary,
    format_summary,
)

# Sanitizer — pure functions and constants
from .sanitizer import (
    DEFAULT_REPLACE_CHAR,
    SHELL_UNSAFE_CHARS,
    ascii_name,
    is_shell_safe,
    sanitize_for_shell,
    validate_replace_char,
)

# Scanner — path expansion and plan building
from .scanner import (
    PendingInput,
    RenameOp,
    RenamePlan,
    build_rename_plan,
    renameable_components,
    trim_trailing_separators,
)

# Tracker — rename history
from .tracker import PathTracker, RenamePair

# Transliterator — result types
from .transliterator import (
    Transliterated,
    Transliteration,
    TransliterationFailed,
    transliterate,
)

# TUI entry point (optional — requires 'tui' extra)
try:
    from .tui import tui_main
except ImportError:

    def tui_main(
        argv: list[str] | None = None,  # pyright: ignore[reportUnusedParameter]
    ) -> int:
        """Stub that prints an install hint when Textual is not available."""
        import sys  # noqa: I001

        print(
            "Error: The TUI requires the 'tui' extra. "
            "Install with: pip install ascii-rename[tui]",
            file=sys.stderr,
        )
        return 1


__all__ = [
    "__version__",
    # CLI
    "main",
    # Filesystem
    "FileSystem",
    "LocalFileSystem",
    # Sanitizer functions
    "ascii_name",
    "is_shell_safe",
    "sanitize_for_shell",
    "validate_replace_char",
    # Sanitizer constants
    "DEFAULT_REPLACE_CHAR",
    "SHELL_UNSAFE_CHARS",
    # Transliterator
    "Transliterated",
    "Transliteration",
    "TransliterationFailed",
    "transliterate",
    # Scanner classes
    "PendingInput",
    "RenameOp",
    "RenamePlan",
    # Scanner functions
    "build_rename_plan",
    "renameable_components",
    "trim_trailing_separators",
    # Tracker
    "PathTracker",
    "RenamePair",
    # Renamer classes
    "OutcomeKind",
    "RenameOutcome",
    "RenameReport",
    # Renamer functions
    "execute_plan",
    "format_outcome",
    "format_plan_summary",
    "format_summary",
    # TUI
    "tui_main",
]

if __name__ == "__main__":
    raise SystemExit(main())
