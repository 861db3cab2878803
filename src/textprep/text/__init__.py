"""Text normalization and tokenization pipeline.

Pure functions over their arguments plus an immutable
:class:`TextOptions` value: purification, order-preserving
de-duplication, word-aware truncation and search tokenization.
"""

from .formatting import NameElements, add_hrefs, contains, friendly_date, nl2br, split_name
from .markup import strip_tags
from .options import DEFAULT_OPTIONS, TextOptions, options_from_config
from .purify import purify
from .shorten import shorten
from .stopwords import DEFAULT_STOP_WORDS, build_table, load_stop_words
from .tokenize import Normalizer, tokenize
from .unique import dedupe

__all__ = [
    "DEFAULT_OPTIONS",
    "DEFAULT_STOP_WORDS",
    "NameElements",
    "Normalizer",
    "TextOptions",
    "add_hrefs",
    "build_table",
    "contains",
    "dedupe",
    "friendly_date",
    "load_stop_words",
    "nl2br",
    "options_from_config",
    "purify",
    "shorten",
    "split_name",
    "strip_tags",
    "tokenize",
]
