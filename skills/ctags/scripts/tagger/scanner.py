from __future__ import annotations

import os
from typing import Iterable, Iterator

from ._fs import open_source, strip_terminator
from .classify import C_LIKE, FORTRAN, ScanState, classify_line
from .errors import FileOpenError, UnknownExtension, UnsupportedExtension
from .store import TagStore

SOURCE_TYPES = {
    ".c": C_LIKE,
    ".h": C_LIKE,
    ".f": FORTRAN,
}


def source_type_for_path(path: str) -> str:
    extension = os.path.splitext(path)[1]
    if not extension:
        raise UnknownExtension(path)
    source_type = SOURCE_TYPES.get(extension)
    if source_type is None:
        raise UnsupportedExtension(path, extension)
    return source_type


def iter_source_lines(lines: Iterable[str]) -> Iterator[str]:
    for raw in lines:
        yield strip_terminator(raw)


def scan_lines(
    lines: Iterable[str],
    path: str,
    source_type: str,
    store: TagStore,
    *,
    track_brackets: bool = False,
) -> ScanState:
    state = ScanState(path=path, source_type=source_type, track_brackets=track_brackets)
    for text in iter_source_lines(lines):
        state.advance()
        classify_line(text, state, store)
    return state


def scan_file(path: str, store: TagStore, *, track_brackets: bool = False) -> int:
    """Tag every line of ``path``; returns the number of lines read.

    Raises the per-file errors before any line is read, so a failing file
    contributes nothing to ``store``.
    """
    source_type = source_type_for_path(path)
    try:
        handle = open_source(path)
    except OSError as exc:
        raise FileOpenError(path, exc) from exc
    with handle:
        state = scan_lines(handle, path, source_type, store, track_brackets=track_brackets)
    return state.line
