"""Immutable configuration for the text pipeline.

A :class:`TextOptions` value is built once (usually from a
:class:`~textprep.core.config.Config` via :func:`options_from_config`)
and passed to every pipeline call. Nothing in the pipeline mutates it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from loguru import logger

from textprep.core.config import Config
from textprep.core.types import StopWordTable

from .stopwords import DEFAULT_STOP_WORDS, load_stop_words, merge_tables, stop_words_for

DEFAULT_LANGUAGE = "en"
DEFAULT_REPLACER = "-"


@dataclass(frozen=True)
class TextOptions:
    """Settings shared by purify, shorten, and tokenize.

    Attributes:
        purify_replacer: Separator purify uses when the caller passes none.
        language: Two-letter code selecting the stop-word set.
        stop_words: Read-only table of language code -> stop words.
        legacy_purify: Keep punctuation and collapse separators in fixed
            steps during purification, matching the older output.
    """

    purify_replacer: str = DEFAULT_REPLACER
    language: str = DEFAULT_LANGUAGE
    stop_words: StopWordTable = field(default_factory=lambda: DEFAULT_STOP_WORDS, repr=False)
    legacy_purify: bool = False

    def __post_init__(self):
        if not self.language:
            object.__setattr__(self, "language", DEFAULT_LANGUAGE)

    @property
    def active_stop_words(self) -> tuple[str, ...]:
        """Stop words for the active language (empty when none are registered)."""
        return stop_words_for(self.stop_words, self.language)


DEFAULT_OPTIONS = TextOptions()


def options_from_config(config: Config) -> TextOptions:
    """Build :class:`TextOptions` from the ``text`` section of *config*.

    Raises:
        ConfigurationError: If the configuration or stop-word file is invalid.
        FileIOError: If the stop-word file cannot be read.
    """
    text = config.validated().text

    table = DEFAULT_STOP_WORDS
    if text.stop_words_file is not None:
        table = merge_tables(table, load_stop_words(text.stop_words_file))

    if text.language not in table:
        logger.debug(f"No stop words registered for {text.language!r}; stop-word removal is disabled")

    return TextOptions(
        purify_replacer=text.purify_replacer,
        language=text.language,
        stop_words=table,
        legacy_purify=text.legacy_purify,
    )
