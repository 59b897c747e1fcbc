"""Interactive TUI for ascii-rename (requires the 'tui' extra)."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import ClassVar

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import (
    Button,
    DataTable,
    Footer,
    Header,
    Input,
    Label,
    RichLog,
    Static,
    Switch,
)
from textual.widgets.data_table import RowKey

from .renamer import OutcomeKind, RenameOutcome, RenameReport, execute_plan, format_summary
from .sanitizer import DEFAULT_REPLACE_CHAR, validate_replace_char
from .scanner import RenamePlan, build_rename_plan

_PREVIEW_KINDS: frozenset[OutcomeKind] = frozenset(
    {
        OutcomeKind.WOULD_RENAME,
        OutcomeKind.COLLISION,
        OutcomeKind.TRANSLITERATION_FAILED,
    }
)


def _status_label(kind: OutcomeKind) -> str:
    if kind == OutcomeKind.COLLISION:
        return "[exists]"
    if kind == OutcomeKind.TRANSLITERATION_FAILED:
        return "[no ascii]"
    return "[rename]"


class RenamerApp(App[int]):
    """Interactive TUI for previewing and applying ASCII renames."""

    TITLE = "ASCII Rename"  # pyright: ignore[reportUnannotatedClassAttribute]

    CSS: ClassVar[str] = """
    #settings-bar {
        height: auto;
        padding: 1 2;
        background: $surface;
        align: left middle;
    }

    #settings-bar Label {
        padding: 0 1;
    }

    #settings-bar Input {
        width: 8;
    }

    #settings-bar Switch {
        margin: 0 1;
    }

    #settings-bar Button {
        margin: 0 1;
    }

    #content-area {
        height: 1fr;
    }

    #rename-table {
        width: 2fr;
    }

    #detail-panel {
        width: 1fr;
        border-left: solid $accent;
        padding: 1 2;
        overflow-y: auto;
    }

    #detail-header {
        text-style: bold;
        margin-bottom: 1;
    }

    #detail-content {
        height: auto;
    }

    #status-area {
        height: 10;
        border-top: solid $accent;
    }

    #log-output {
        height: 1fr;
    }
    """

    BINDINGS = [  # pyright: ignore[reportUnannotatedClassAttribute]
        Binding("q", "quit", "Quit"),
        Binding("r", "rescan", "Re-scan"),
        Binding("a", "apply", "Apply Renames"),
    ]

    def __init__(self, paths: list[Path], *, recursive: bool = False) -> None:
        super().__init__()
        self.paths: list[Path] = paths  # pyright: ignore[reportUnannotatedClassAttribute]
        self.initial_recursive: bool = recursive
        self.current_preview: RenameReport | None = None
        self.row_outcomes: dict[RowKey, RenameOutcome] = {}

    def compose(self) -> ComposeResult:  # pyright: ignore[reportImplicitOverride]
        yield Header()
        with Vertical():
            with Horizontal(id="settings-bar"):
                yield Label("Replace char:")
                yield Input(
                    id="replace-char",
                    value=DEFAULT_REPLACE_CHAR,
                    max_length=1,
                )
                yield Label("Recursive:")
                yield Switch(id="recursive", value=self.initial_recursive)
                yield Label("Overwrite:")
                yield Switch(id="overwrite", value=False)
                yield Button("Re-scan", id="rescan-btn", variant="default")
                yield Button("Apply Renames", id="apply-btn", variant="warning", disabled=True)
            with Horizontal(id="content-area"):
                yield DataTable(id="rename-table", cursor_type="row")
                with Vertical(id="detail-panel"):
                    yield Static("Select a row to see details", id="detail-header")
                    yield Static("", id="detail-content")
            with Vertical(id="status-area"):
                yield RichLog(id="log-output", max_lines=200, markup=True)
        yield Footer()

    def on_mount(self) -> None:
        table: DataTable[str] = self.query_one(  # pyright: ignore[reportUnknownVariableType]
            "#rename-table", DataTable
        )
        table.add_columns("Status", "Original Name", "Renamed To", "Directory")
        self.action_rescan()

    def _read_settings(self) -> tuple[str, bool, bool] | None:
        """Read and validate settings from widgets. Returns None on validation error."""
        log = self.query_one("#log-output", RichLog)

        replace_char = self.query_one("#replace-char", Input).value or DEFAULT_REPLACE_CHAR
        try:
            validate_replace_char(replace_char)
        except ValueError as exc:
            log.write(f"[red]Error:[/red] {exc}.")
            return None

        recursive = self.query_one("#recursive", Switch).value
        overwrite = self.query_one("#overwrite", Switch).value

        return replace_char, recursive, overwrite

    def action_rescan(self) -> None:
        settings = self._read_settings()
        if settings is None:
            return
        replace_char, recursive, overwrite = settings

        self.query_one("#rename-table", DataTable).loading = True
        self.query_one("#apply-btn", Button).disabled = True
        self.run_scan(replace_char, recursive, overwrite)

    def action_apply(self) -> None:
        if self.current_preview is None or self.current_preview.renamed == 0:
            log = self.query_one("#log-output", RichLog)
            log.write("Nothing to apply.")
            return
        settings = self._read_settings()
        if settings is None:
            return
        self.query_one("#apply-btn", Button).disabled = True
        self.query_one("#rescan-btn", Button).disabled = True
        self.run_apply(*settings)

    @work(exclusive=True, thread=True)
    def run_scan(self, replace_char: str, recursive: bool, overwrite: bool) -> None:
        plan = build_rename_plan(self.paths, recursive=recursive)
        preview = execute_plan(plan, noop=True, overwrite=overwrite, replace_char=replace_char)
        self.call_from_thread(self._populate_table, plan, preview)

    def _populate_table(self, plan: RenamePlan, preview: RenameReport) -> None:
        self.current_preview = preview
        table: DataTable[str] = self.query_one(  # pyright: ignore[reportUnknownVariableType]
            "#rename-table", DataTable
        )
        table.clear()
        self.row_outcomes.clear()

        for outcome in preview.outcomes:
            if outcome.kind not in _PREVIEW_KINDS:
                continue
            row_key = table.add_row(  # pyright: ignore[reportUnknownMemberType]
                _status_label(outcome.kind),
                outcome.source.name,
                outcome.destination.name if outcome.destination is not None else "",
                str(outcome.source.parent),
            )
            self.row_outcomes[row_key] = outcome

        table.loading = False
        self.query_one("#apply-btn", Button).disabled = preview.renamed == 0

        # Update detail panel
        header = self.query_one("#detail-header", Static)
        content = self.query_one("#detail-content", Static)
        header.update("Select a row to see details")
        content.update("")

        log = self.query_one("#log-output", RichLog)
        log.write(
            f"Collected {len(plan)} path components, "
            f"{preview.renamed} renames needed, {preview.skipped} would be skipped."
        )
        for missing in plan.missing_inputs:
            log.write(f"[red]Error:[/red] {missing} doesn't exist.")
        for directory, reason in plan.unreadable_dirs:
            log.write(f"[yellow]Warning:[/yellow] unable to list {directory}: {reason}")

    @work(exclusive=True, thread=True)
    def run_apply(self, replace_char: str, recursive: bool, overwrite: bool) -> None:
        # Rebuild the plan: the disk may have changed since the preview.
        plan = build_rename_plan(self.paths, recursive=recursive)
        report = execute_plan(plan, overwrite=overwrite, replace_char=replace_char)

        def update_ui() -> None:
            log = self.query_one("#log-output", RichLog)
            for outcome in report.outcomes:
                if outcome.kind == OutcomeKind.RENAMED:
                    log.write(f"[green]OK[/green] {outcome.source} -> {outcome.destination}")
                elif outcome.kind.is_skip:
                    log.write(f"[red]FAIL[/red] {outcome.source}: {outcome.error_message}")
            log.write(f"\nDone. {format_summary(report)}")

            self.query_one("#apply-btn", Button).disabled = True
            self.query_one("#rescan-btn", Button).disabled = False
            self.current_preview = None

        self.call_from_thread(update_ui)

    def on_data_table_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        outcome = self.row_outcomes.get(event.row_key)
        if outcome is None:
            return
        header = self.query_one("#detail-header", Static)
        content = self.query_one("#detail-content", Static)
        header.update(f"{_status_label(outcome.kind)} {outcome.source.name}")
        lines = [
            f"Source:      {outcome.source}",
            f"Destination: {outcome.destination or '-'}",
            f"Status:      {outcome.kind.value}",
        ]
        if outcome.error_message:
            lines += ["", f"Error: {outcome.error_message}"]
        content.update("\n".join(lines))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "rescan-btn":
            self.action_rescan()
        elif event.button.id == "apply-btn":
            self.action_apply()


def tui_main(argv: list[str] | None = None) -> int:
    """CLI entry point for the TUI."""
    parser = argparse.ArgumentParser(
        prog="ascii-rename-tui",
        description="Interactive TUI for renaming files to shell-safe ASCII names.",
    )
    parser.add_argument("paths", nargs="+", type=Path, help="Files or directories to rename.")
    parser.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        default=False,
        help="Rename files and subdirectories recursively.",
    )
    args = parser.parse_args(argv)

    paths: list[Path] = args.paths
    missing = [p for p in paths if not (p.exists() or p.is_symlink())]
    if missing:
        for p in missing:
            print(f"Error: '{p}' doesn't exist.", file=sys.stderr)
        return 1

    app = RenamerApp(paths=paths, recursive=args.recursive)
    result = app.run()
    return result if result is not None else 0
