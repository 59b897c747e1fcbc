"""Command-line interface and main entry point for ascii-rename."""

from __future__ import annotations

import argparse
import sys

from ._version import __version__
from .renamer import (
    RenameOutcome,
    execute_plan,
    format_outcome,
    format_plan_summary,
    format_summary,
)
from .sanitizer import DEFAULT_REPLACE_CHAR, validate_replace_char
from .scanner import build_rename_plan

PROG = "ascii-rename"

# Exit code for an invalid invocation; nothing has been touched yet.
EXIT_USAGE = -1


def create_parser() -> argparse.ArgumentParser:
    """Create and return the argument parser."""

    parser = argparse.ArgumentParser(
        prog=PROG,
        usage=f"{PROG} [options...] [paths...]",
        allow_abbrev=False,
        description=(
            "Rename files and directories whose names contain non-ASCII "
            "characters to ASCII transliterations, replacing characters that "
            "are unsafe in a shell. Parent directories of each path are "
            "renamed too. The exit code is the number of skipped renames."
        ),
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="Files or directories to rename.",
    )
    parser.add_argument(
        "-n",
        "--no-op",
        dest="noop",
        action="store_true",
        default=False,
        help="Show what would happen but don't actually rename path(s).",
    )
    parser.add_argument(
        "-o",
        "--overwrite",
        action="store_true",
        default=False,
        help="Overwrite existing path(s).",
    )
    parser.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        default=False,
        help="Rename files and subdirectories recursively.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Make the output more verbose.",
    )
    parser.add_argument(
        "--replace-char",
        type=str,
        default=DEFAULT_REPLACE_CHAR,
        help=(
            "Character to replace shell metacharacters with "
            f"(default: '{DEFAULT_REPLACE_CHAR}')."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"{PROG} {__version__}",
        help="Show version number and exit.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to ``sys.argv[1:]``).

    Returns:
        Exit code: the number of skipped renames (0 on full success), or
        -1 if an option was not recognized.
    """
    if argv is None:
        argv = sys.argv[1:]

    if not argv:
        print(f"{PROG}: try '{PROG} --help' for more information")
        return 0

    parser = create_parser()
    try:
        args, extras = parser.parse_known_args(argv)
    except SystemExit as exc:
        # --help and --version exit 0; argparse has already reported anything else.
        if exc.code == 0:
            raise
        return EXIT_USAGE

    # Dash arguments are never paths, including "-" and anything after "--".
    for arg in [*args.paths, *extras]:
        if arg.startswith("-"):
            print(
                f'ERROR: "{arg}" option not recognized. Run with --help for usage info.',
                file=sys.stderr,
            )
            return EXIT_USAGE

    # Extract typed values from argparse namespace.
    paths: list[str] = [*args.paths, *extras]
    noop: bool = args.noop
    overwrite: bool = args.overwrite
    recursive: bool = args.recursive
    verbose: bool = args.verbose
    replace_char: str = args.replace_char

    try:
        validate_replace_char(replace_char)
    except ValueError as exc:
        print(f"ERROR: --replace-char: {exc}.", file=sys.stderr)
        return EXIT_USAGE

    plan = build_rename_plan(paths, recursive=recursive)

    for missing in plan.missing_inputs:
        print(f'ERROR: "{missing}" doesn\'t exist.', file=sys.stderr)
    for directory, reason in plan.unreadable_dirs:
        print(f'ERROR: Unable to list "{directory}": {reason}', file=sys.stderr)

    if verbose:
        print(format_plan_summary(plan))

    def show(outcome: RenameOutcome) -> None:
        out, err = format_outcome(outcome, verbose=verbose)
        for line in out:
            print(line)
        for line in err:
            print(line, file=sys.stderr)

    report = execute_plan(
        plan,
        noop=noop,
        overwrite=overwrite,
        replace_char=replace_char,
        on_outcome=show,
    )

    if verbose:
        print(format_summary(report))

    return report.skipped
