"""Search-index tokenization.

:func:`tokenize` merges any number of text fields into one canonical token
string: lowercase, de-duplicated, sorted, stop-word free and space-joined.
It is meant for a full-text index column, not for querying.

Example::

    options = TextOptions(language="en")
    tokenize("The Quick Fox", "<p>A quick brown fox</p>", options=options)
    # -> 'brown fox quick'
"""

from __future__ import annotations

from collections.abc import Iterable

from .markup import strip_tags
from .options import DEFAULT_OPTIONS, TextOptions
from .purify import purify
from .shorten import shorten
from .unique import T, dedupe

# Replaced with spaces after stop-word removal
SYMBOLS = (
    "~", "`", "!", "@", "#", "$", "%", "^", "&", "*", "(", ")", "-", "_", "=", "+",
    "<", ",", ">", ".", "?", "/", ":", ";", "'", "{", "[", "}", "]", "\\", "|",
)  # fmt: skip


def _remove_stop_words(padded: str, stop_words: tuple[str, ...]) -> str:
    # Whole-word match only: *padded* starts and ends with a space.
    for word in stop_words:
        padded = padded.replace(f" {word} ", " ")
    return padded


def tokenize(*fields: str, options: TextOptions | None = None) -> str:
    """Build the indexable token string for *fields*.

    Markup is stripped from each field, everything is lowercased and
    purified with a space separator, then split into words. The words are
    de-duplicated, sorted, stripped of the active language's stop words
    and of punctuation, and purified once more.

    Never raises; a language without registered stop words simply keeps
    every word.
    """
    options = options or DEFAULT_OPTIONS

    full_text = "".join(" " + strip_tags(f).lower() for f in fields)
    words = purify(full_text, " ", options=options).split()
    words = sorted(dedupe(words))

    result = _remove_stop_words(" " + " ".join(words) + " ", options.active_stop_words)
    result = result.strip(" ")
    for symbol in SYMBOLS:
        result = result.replace(symbol, " ")

    return purify(result, " ", options=options).strip(" ")


class Normalizer:
    """The text pipeline bound to one :class:`TextOptions` value.

    Convenient when a caller configures the pipeline once and then calls
    it from many places::

        normalizer = Normalizer(options_from_config(config))
        normalizer.tokenize(title, description)
    """

    def __init__(self, options: TextOptions | None = None):
        self.options = options or DEFAULT_OPTIONS

    def purify(self, text: str, separator: str | None = None) -> str:
        return purify(text, separator, options=self.options)

    def dedupe(self, items: Iterable[T]) -> list[T]:
        return dedupe(items)

    def shorten(self, text: str, limit: int, use_words: bool = False, add_ellipsis: bool = False) -> str:
        return shorten(text, limit, use_words, add_ellipsis)

    def tokenize(self, *fields: str) -> str:
        return tokenize(*fields, options=self.options)
