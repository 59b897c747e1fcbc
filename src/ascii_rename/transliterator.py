"""Best-effort transliteration of filenames to ASCII.

The platform path string is converted to its canonical UTF-8 byte form and
decoded leniently: bytes that are not valid UTF-8 are dropped rather than
failing the whole name.  The decoded text is then mapped codepoint by
codepoint through ``unidecode``; codepoints without a known ASCII
approximation are dropped.

Failures are returned as values, never raised.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from unidecode import unidecode


@dataclass(frozen=True)
class Transliterated:
    """A successful transliteration."""

    text: str

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class TransliterationFailed:
    """A name that has no usable ASCII form."""

    reason: str

    @property
    def ok(self) -> bool:
        return False


Transliteration = Transliterated | TransliterationFailed


def to_utf8_text(name: str) -> str:
    """Return *name* as clean UTF-8 text, skipping undecodable bytes.

    Raises ``UnicodeEncodeError`` if *name* cannot be represented in the
    filesystem encoding at all.
    """
    return os.fsencode(name).decode("utf-8", errors="ignore")


def transliterate(name: str) -> Transliteration:
    """Transliterate a single filename to ASCII."""
    try:
        text = to_utf8_text(name)
    except UnicodeEncodeError as exc:
        return TransliterationFailed(f"cannot encode name: {exc.reason}")

    result = unidecode(text, errors="ignore")

    if name and not result:
        return TransliterationFailed("name has no ASCII equivalent")
    return Transliterated(result)
