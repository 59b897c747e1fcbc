"""Tests that the public API is accessible from the top-level package."""

from __future__ import annotations


class TestPublicAPI:
    def test_sanitizer_importable(self) -> None:
        from ascii_rename import (
            DEFAULT_REPLACE_CHAR,
            SHELL_UNSAFE_CHARS,
            ascii_name,
            is_shell_safe,
            sanitize_for_shell,
            validate_replace_char,
        )

        assert callable(ascii_name)
        assert callable(is_shell_safe)
        assert callable(sanitize_for_shell)
        assert callable(validate_replace_char)
        assert DEFAULT_REPLACE_CHAR == "_"
        assert "\n" in SHELL_UNSAFE_CHARS

    def test_transliterator_importable(self) -> None:
        from ascii_rename import Transliterated, TransliterationFailed, transliterate

        assert transliterate("é") == Transliterated("e")
        assert TransliterationFailed("x").ok is False

    def test_scanner_importable(self) -> None:
        from ascii_rename import (
            PendingInput,
            RenameOp,
            RenamePlan,
            build_rename_plan,
            renameable_components,
            trim_trailing_separators,
        )

        assert RenamePlan().operations == []
        assert PendingInput is not None
        assert RenameOp is not None
        assert callable(build_rename_plan)
        assert callable(renameable_components)
        assert callable(trim_trailing_separators)

    def test_tracker_importable(self) -> None:
        from ascii_rename import PathTracker, RenamePair

        assert PathTracker().history == ()
        assert RenamePair is not None

    def test_renamer_importable(self) -> None:
        from ascii_rename import (
            OutcomeKind,
            RenameOutcome,
            RenameReport,
            execute_plan,
            format_outcome,
            format_plan_summary,
            format_summary,
        )

        assert OutcomeKind.RENAMED.value == "renamed"
        assert RenameOutcome is not None
        assert RenameReport().skipped == 0
        assert callable(execute_plan)
        assert callable(format_outcome)
        assert callable(format_plan_summary)
        assert callable(format_summary)

    def test_filesystem_importable(self) -> None:
        from ascii_rename import FileSystem, LocalFileSystem

        fs: FileSystem = LocalFileSystem()
        assert callable(fs.rename)

    def test_main_importable(self) -> None:
        from ascii_rename import __version__, main

        assert callable(main)
        assert __version__

    def test_all_is_complete(self) -> None:
        import ascii_rename
        from ascii_rename import ascii_rename as api

        expected = {
            "__version__",
            "main",
            "FileSystem",
            "LocalFileSystem",
            "ascii_name",
            "is_shell_safe",
            "sanitize_for_shell",
            "validate_replace_char",
            "DEFAULT_REPLACE_CHAR",
            "SHELL_UNSAFE_CHARS",
            "Transliterated",
            "Transliteration",
            "TransliterationFailed",
            "transliterate",
            "PendingInput",
            "RenameOp",
            "RenamePlan",
            "build_rename_plan",
            "renameable_components",
            "trim_trailing_separators",
            "PathTracker",
            "RenamePair",
            "OutcomeKind",
            "RenameOutcome",
            "RenameReport",
            "execute_plan",
            "format_outcome",
            "format_plan_summary",
            "format_summary",
            "tui_main",
        }
        assert set(ascii_rename.__all__) == expected
        assert set(api.__all__) == expected
