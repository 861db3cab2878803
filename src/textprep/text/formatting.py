"""Small display helpers: names, dates, line breaks, links."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import TypeVar

T = TypeVar("T")

_URL = re.compile(
    r"(http|ftp|https)://([\w\-_]+(?:(?:\.[\w\-_]+)+))"
    r"([\w\-\.,@?^=%&amp;:/~\+#]*[\w\-\@?^=%&amp;/~\+#])?"
)


@dataclass
class NameElements:
    """A full name split into first and last parts."""

    first_name: str = ""
    last_name: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"first_name": self.first_name, "last_name": self.last_name}


def split_name(full_name: str) -> NameElements:
    """Split on single spaces: the first piece is the first name, the rest the last name.

    >>> split_name("Ada King Lovelace")
    NameElements(first_name='Ada', last_name='King Lovelace')
    """
    first, _, rest = full_name.partition(" ")
    return NameElements(first_name=first, last_name=rest)


def friendly_date(value: datetime | None, include_time: bool = False) -> str:
    """Format as ``MM/DD/YYYY`` (plus ``HH:MM`` when asked); ``"-"`` for None."""
    if value is None:
        return "-"
    if include_time:
        return f"{value.month:02d}/{value.day:02d}/{value.year} {value.hour:02d}:{value.minute:02d}"
    return f"{value.month:02d}/{value.day:02d}/{value.year}"


def nl2br(text: str) -> str:
    return text.replace("\n", "<br />")


def add_hrefs(text: str) -> str:
    """Wrap every http, https or ftp URL in an anchor opening a new tab."""
    return _URL.sub(r'<a href="\g<0>" target="_blank">\g<0></a>', text)


def contains(items: Iterable[T], element: T) -> bool:
    """Equality-based membership test over any iterable."""
    return any(item == element for item in items)
