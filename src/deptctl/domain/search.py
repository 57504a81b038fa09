"""Line search: substring matching over a text body, line by line.

Lines are separated by ``\\n``; a trailing ``\\r`` on each line is dropped.
Case-insensitive mode lowercases the query and each line at comparison time
and returns the line as it appeared in the text.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple

from pydantic import BaseModel


class SearchQuery(BaseModel):
    """One search request."""

    model_config = {"frozen": True}

    pattern: str
    case_sensitive: bool = True


class SearchMatch(NamedTuple):
    line_number: int
    line: str


def split_lines(text: str) -> list[str]:
    """Split *text* into lines.

    Examples:
        >>> split_lines("a\\r\\nb\\n")
        ['a', 'b']
        >>> split_lines("")
        []
    """
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [p[:-1] if p.endswith("\r") else p for p in parts]


def find_matches(query: SearchQuery, text: str) -> Iterator[SearchMatch]:
    """Yield every line of *text* containing ``query.pattern``, in order."""
    if query.case_sensitive:
        for number, line in enumerate(split_lines(text), start=1):
            if query.pattern in line:
                yield SearchMatch(number, line)
        return

    pattern = query.pattern.lower()
    for number, line in enumerate(split_lines(text), start=1):
        if pattern in line.lower():
            yield SearchMatch(number, line)


def search(query: str, text: str, case_sensitive: bool = True) -> list[str]:
    """Return the lines of *text* that contain *query*.

    An empty query matches every line.

    Examples:
        >>> search("RUST", "Rust\\nTrust me.\\nOther", case_sensitive=False)
        ['Rust', 'Trust me.']
    """
    q = SearchQuery(pattern=query, case_sensitive=case_sensitive)
    return [m.line for m in find_matches(q, text)]
