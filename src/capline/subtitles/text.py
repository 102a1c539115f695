"""Caption text cleanup.

Turns raw recognizer output into display-ready caption text. The steps
run in a fixed order; later steps rely on the whitespace guarantees of
earlier ones, and the whole pipeline is idempotent.
"""

from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")
_TAG_RE = re.compile(r"<[^>]*>")
_SPACE_BEFORE_TERMINAL_RE = re.compile(r"\s+([.!?])")
# Terminal mark glued to the next word, e.g. "world.this"
_TERMINAL_BEFORE_LETTER_RE = re.compile(r"([.!?])(?=[^\W\d_])")
_SENTENCE_START_RE = re.compile(r"([.!?]\s+)([^\W\d_])")


def _collapse(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def normalize(text: str | None) -> str:
    """Clean recognized text for display.

    1. Trim and collapse whitespace runs.
    2. Strip ``<...>`` markup (re-collapsing the gaps it leaves).
    3. Drop whitespace before ``.``, ``!``, ``?`` and separate a terminal
       mark from a word glued to it.
    4. Capitalize sentence starts and the first character.

    Mid-sentence casing is left alone. ``None`` or empty input gives ``""``.
    """
    if not text:
        return ""

    text = _collapse(text)
    text = _collapse(_TAG_RE.sub("", text))
    text = _SPACE_BEFORE_TERMINAL_RE.sub(r"\1", text)
    text = _TERMINAL_BEFORE_LETTER_RE.sub(r"\1 ", text)
    text = _SENTENCE_START_RE.sub(lambda m: m.group(1) + m.group(2).upper(), text)

    if text and text[0].islower():
        text = text[0].upper() + text[1:]
    return text
