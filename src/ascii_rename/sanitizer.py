"""Pure functions for making filenames ASCII-only and safe to use in a shell.

This module contains no filesystem access — only string transformations.

The pipeline for a single name:
  1. Transliterate to ASCII (see ``transliterator``)
  2. Replace path separators produced by transliteration (e.g. ``⁄`` -> ``/``)
  3. Replace shell metacharacters with a placeholder, one for one
  4. Reject results that are ``.`` or ``..``
"""

from __future__ import annotations

import re
import string

from .transliterator import (
    Transliterated,
    Transliteration,
    TransliterationFailed,
    transliterate,
)

# Characters that have special meaning to POSIX shells and cmd.exe.
SHELL_UNSAFE_CHARS: frozenset[str] = frozenset(";$`|&><'\"\\*?[]()!~#\n\r")

DEFAULT_REPLACE_CHAR: str = "_"

# Pre-compiled regex matching any single unsafe character.
_SHELL_UNSAFE_RE: re.Pattern[str] = re.compile(
    "[" + re.escape("".join(sorted(SHELL_UNSAFE_CHARS))) + "]"
)

_RESERVED_NAMES: frozenset[str] = frozenset({".", ".."})

_PRINTABLE_ASCII: frozenset[str] = frozenset(string.printable) - frozenset(string.whitespace)


def validate_replace_char(replace_char: str) -> None:
    """Raise ``ValueError`` if *replace_char* cannot be used as a placeholder."""
    if len(replace_char) != 1:
        raise ValueError("replace char must be a single character")
    if replace_char not in _PRINTABLE_ASCII:
        raise ValueError(f"replace char {replace_char!r} is not a printable ASCII character")
    if replace_char in SHELL_UNSAFE_CHARS:
        raise ValueError(f"replace char {replace_char!r} is itself a shell metacharacter")
    if replace_char == "/":
        raise ValueError("replace char cannot be a path separator")


def sanitize_for_shell(name: str, replace_char: str = DEFAULT_REPLACE_CHAR) -> str:
    """Replace every shell metacharacter in *name* with *replace_char*.

    The result always has the same length as *name*.
    """
    return _SHELL_UNSAFE_RE.sub(replace_char, name)


def is_shell_safe(name: str) -> bool:
    """Return ``True`` if *name* is ASCII and contains no shell metacharacters."""
    return name.isascii() and _SHELL_UNSAFE_RE.search(name) is None


def ascii_name(name: str, replace_char: str = DEFAULT_REPLACE_CHAR) -> Transliteration:
    """Run the full pipeline on a single filename or directory name."""
    result = transliterate(name)
    if not isinstance(result, Transliterated):
        return result
    text = sanitize_for_shell(result.text.replace("/", replace_char), replace_char)
    if text in _RESERVED_NAMES:
        return TransliterationFailed(f"name becomes reserved name {text!r}")
    return Transliterated(text)
