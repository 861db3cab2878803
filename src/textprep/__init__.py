"""textprep: normalize free text for storage, display and search indexing."""

__version__ = "0.1.0"

from textprep.text import Normalizer, TextOptions, dedupe, purify, shorten, tokenize

__all__ = [
    "Normalizer",
    "TextOptions",
    "__version__",
    "dedupe",
    "purify",
    "shorten",
    "tokenize",
]
