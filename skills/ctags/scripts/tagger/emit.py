from __future__ import annotations

from typing import IO, Iterable

from .store import Tag


def tag_table_record(tag: Tag) -> str:
    # Pattern goes out verbatim; regex metacharacters are not escaped.
    return f"{tag.name}\t{tag.file}\t/^{tag.pattern}$/\n"


def listing_record(tag: Tag) -> str:
    return f"{tag.name} {tag.line} {tag.file} {tag.pattern}\n"


def write_tag_table(tags: Iterable[Tag], handle: IO[str]) -> int:
    count = 0
    for tag in tags:
        handle.write(tag_table_record(tag))
        count += 1
    return count


def write_listing(tags: Iterable[Tag], handle: IO[str]) -> int:
    count = 0
    for tag in tags:
        handle.write(listing_record(tag))
        count += 1
    return count
