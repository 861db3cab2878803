"""Character- and word-budget truncation."""

from __future__ import annotations

from .markup import strip_tags

ELLIPSIS = "..."


def shorten(text: str, limit: int, use_words: bool = False, add_ellipsis: bool = False) -> str:
    """Cut *text* down to *limit* characters or words after stripping markup.

    Args:
        text: Input string; markup tags are removed before measuring.
        limit: Character or word budget. Negative values count as zero.
        use_words: Count words (split on single spaces) instead of characters.
        add_ellipsis: Append ``"..."`` in word mode when words were dropped.
            Character mode never appends it, so its result never exceeds *limit*.

    >>> shorten("<p>Hello World Example</p>", 2, use_words=True, add_ellipsis=True)
    'Hello World...'
    """
    if not text:
        return ""
    limit = max(limit, 0)
    text = strip_tags(text)

    if not use_words:
        return text[: min(limit, len(text))]

    words = text.split(" ")
    if len(words) <= limit:
        limit = len(words)
        add_ellipsis = False

    shortened = " ".join(words[:limit])
    if add_ellipsis:
        shortened += ELLIPSIS
    return shortened
