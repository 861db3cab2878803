"""Stop-word tables.

A table maps a two-letter language code to an ordered tuple of stop words.
Tables are read-only (``MappingProxyType``) and built once at startup;
extra languages come from a YAML file shaped like::

    en: [a, an, the]
    de: [der, die, das]
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

import yaml
from loguru import logger

from textprep.core.exceptions import ConfigurationError, FileIOError
from textprep.core.types import PathLike, StopWordTable

_ENGLISH = (
    "a", "about", "above", "after", "again", "against", "all", "am", "an", "and",
    "any", "are", "as", "at", "be", "because", "been", "before", "being", "below",
    "between", "both", "but", "by", "can", "could", "did", "do", "does", "doing",
    "down", "during", "each", "few", "for", "from", "further", "had", "has", "have",
    "having", "he", "her", "here", "hers", "herself", "him", "himself", "his", "how",
    "i", "if", "in", "into", "is", "it", "its", "itself", "just", "me", "more",
    "most", "my", "myself", "no", "nor", "not", "now", "of", "off", "on", "once",
    "only", "or", "other", "our", "ours", "ourselves", "out", "over", "own", "same",
    "she", "should", "so", "some", "such", "than", "that", "the", "their", "theirs",
    "them", "themselves", "then", "there", "these", "they", "this", "those", "through",
    "to", "too", "under", "until", "up", "very", "was", "we", "were", "what", "when",
    "where", "which", "while", "who", "whom", "why", "will", "with", "would", "you",
    "your", "yours", "yourself", "yourselves",
)  # fmt: skip

EMPTY_TABLE: StopWordTable = MappingProxyType({})

DEFAULT_STOP_WORDS: StopWordTable = MappingProxyType({"en": _ENGLISH})


def build_table(entries: Mapping[str, Iterable[str]]) -> StopWordTable:
    """Freeze *entries* into a read-only table with lowercased codes and words."""
    frozen: dict[str, tuple[str, ...]] = {}
    for code, words in entries.items():
        frozen[str(code).strip().lower()] = tuple(str(w).lower() for w in words)
    return MappingProxyType(frozen)


def merge_tables(base: StopWordTable, override: StopWordTable) -> StopWordTable:
    """Return a new table where *override* replaces *base* per language."""
    return MappingProxyType({**base, **override})


def load_stop_words(path: PathLike) -> StopWordTable:
    """Load a stop-word table from a YAML file.

    Raises:
        FileIOError: If the file cannot be read.
        ConfigurationError: If the file is not a mapping of code -> list of words.
    """
    path = Path(path)
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except OSError as e:
        raise FileIOError(f"Cannot read stop-word file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Malformed stop-word file {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigurationError(f"Stop-word file {path} must map language codes to word lists")
    for code, words in raw.items():
        if not isinstance(code, str):
            # YAML 1.1 reads bare no/on/off/yes/y/n as booleans
            raise ConfigurationError(
                f"Language code {code!r} in {path} is not a string; quote it (e.g. 'no': [...])"
            )
        if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            raise ConfigurationError(f"Stop words for {code!r} in {path} must be a list of strings")

    table = build_table(raw)
    logger.debug(f"Loaded stop words for {sorted(table)} from {path}")
    return table


def stop_words_for(table: StopWordTable, language: str) -> tuple[str, ...]:
    """Return the stop words registered for *language*, or an empty tuple."""
    return tuple(table.get(language, ()))
