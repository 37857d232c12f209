"""Filesystem helpers.

Rules:
- source files are read with ``\\n`` as the only line terminator, untranslated
- undecodable bytes survive the trip from source to tags file unchanged
"""
from __future__ import annotations

from pathlib import Path
from typing import IO, Union

ENCODING = "utf-8"
ERRORS = "surrogateescape"

PathLike = Union[str, Path]


def open_source(path: PathLike) -> IO[str]:
    return open(path, "r", encoding=ENCODING, errors=ERRORS, newline="\n")


def open_tags_file(path: PathLike, append: bool = False) -> IO[str]:
    return open(path, "a" if append else "w", encoding=ENCODING, errors=ERRORS, newline="")


def strip_terminator(line: str) -> str:
    if line.endswith("\n"):
        return line[:-1]
    return line


def use_surrogateescape(stream: IO[str]) -> IO[str]:
    """Let ``stream`` write back the raw bytes of undecodable source text."""
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors=ERRORS)
    return stream
