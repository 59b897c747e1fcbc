__all__ = (  # noqa: F405
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
)

from .ascii_rename import *  # noqa: F403
