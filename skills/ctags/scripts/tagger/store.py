from __future__ import annotations

import bisect
import locale
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Callable, Iterator, List

Compare = Callable[[str, str], int]


@dataclass(frozen=True)
class Tag:
    name: str
    file: str
    pattern: str
    line: int


def codepoint_compare(left: str, right: str) -> int:
    """Unlocalized collation: plain code point order."""
    return (left > right) - (left < right)


class TagStore:
    """Tags ordered by name under a three-way ``compare``.

    Equal names are all kept and come back in insertion order.
    """

    def __init__(self, compare: Compare = locale.strcoll) -> None:
        self._key = cmp_to_key(compare)
        self._keys: List[Any] = []
        self._tags: List[Tag] = []

    def __len__(self) -> int:
        return len(self._tags)

    def insert(self, tag: Tag) -> None:
        key = self._key(tag.name)
        index = bisect.bisect_right(self._keys, key)
        self._keys.insert(index, key)
        self._tags.insert(index, tag)

    def add(self, name: str, file: str, pattern: str, line: int) -> Tag:
        tag = Tag(name=name, file=file, pattern=pattern, line=line)
        self.insert(tag)
        return tag

    def traverse(self) -> Iterator[Tag]:
        return iter(tuple(self._tags))
