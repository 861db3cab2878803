"""Purification: reduce a string to lowercase words joined by one separator."""

from __future__ import annotations

import re
import unicodedata
from itertools import groupby

from .options import DEFAULT_OPTIONS, TextOptions

DEFAULT_SEPARATOR = "-"

# Replaced with the default separator before collapsing, along with whitespace
ENTITY_ARTIFACTS = ("&quot;", "&#039;", "#039;", "#39;", "&amp;")

_WHITESPACE = re.compile(r"\s")


def _is_word_char(c: str) -> bool:
    # Combining marks (accents, vowel signs, viramas) belong to the word
    return c.isalnum() or unicodedata.category(c).startswith("M")


def _collapse_non_word(text: str) -> str:
    return "".join(
        "".join(run) if is_word else DEFAULT_SEPARATOR for is_word, run in groupby(text, key=_is_word_char)
    )


def _collapse_stepwise(text: str) -> str:
    # Runs of 5, 4, 3 then 2 separators, one non-overlapping pass each.
    # Long runs are reduced but not always to a single separator.
    for width in (5, 4, 3, 2):
        text = text.replace(DEFAULT_SEPARATOR * width, DEFAULT_SEPARATOR)
    return text


def purify(
    text: str,
    separator: str | None = None,
    *,
    legacy: bool | None = None,
    options: TextOptions | None = None,
) -> str:
    """Lowercase *text* and join its words with *separator*.

    Whitespace and HTML entity leftovers (``&quot;``, ``&#039;``, ``&amp;`` ...)
    become separators, then every run of characters that are not letters,
    digits or combining marks collapses to one separator. The text is NFC
    normalized first, so a decomposed ``café`` or a Devanagari word with
    vowel signs stays one word.

    ``legacy=True`` reproduces the older output instead: punctuation other
    than the entity leftovers is kept, and separator runs are collapsed in
    fixed steps of 5, 4, 3 and 2, so very long runs may leave more than one.

    Args:
        text: Input string; may be empty.
        separator: Replacement separator. ``None`` uses ``options.purify_replacer``.
        legacy: Override ``options.legacy_purify``.
        options: Pipeline options; defaults to :data:`DEFAULT_OPTIONS`.

    >>> purify("Tom &amp; Jerry's  Show", "_")
    'tom_jerry_s_show'
    >>> purify("Tom &amp; Jerry's  Show", "_", legacy=True)
    "tom_jerry's_show"
    """
    options = options or DEFAULT_OPTIONS
    if separator is None:
        separator = options.purify_replacer
    if legacy is None:
        legacy = options.legacy_purify

    if not legacy:
        text = unicodedata.normalize("NFC", text)
    text = _WHITESPACE.sub(DEFAULT_SEPARATOR, text.lower())
    for artifact in ENTITY_ARTIFACTS:
        text = text.replace(artifact, DEFAULT_SEPARATOR)

    if legacy:
        text = _collapse_stepwise(text)
    else:
        text = _collapse_non_word(text)

    return text.replace(DEFAULT_SEPARATOR, separator)
