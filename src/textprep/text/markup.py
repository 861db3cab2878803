"""HTML/XML tag stripping.

Closed tags are dropped and their text content is kept. Entity and
character references pass through untouched so that purification can deal
with ``&amp;`` and friends itself. A ``<`` that does not open a tag
(``3 < 5``) is plain text.
"""

from __future__ import annotations

import re

_COMMENT = re.compile(r"<!--.*?-->", re.DOTALL)
_TAG = re.compile(r"<[a-zA-Z/!?][^<>]*>")


def strip_tags(text: str) -> str:
    """Remove markup tags from *text*, keeping their content.

    >>> strip_tags("<p>Hello <b>World</b></p>")
    'Hello World'
    """
    if not text or "<" not in text:
        return text or ""
    return _TAG.sub("", _COMMENT.sub("", text))
