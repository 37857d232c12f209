from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .store import TagStore

C_LIKE = "c"
FORTRAN = "fortran"

DEFINE_MARKER = "#define "
TYPEDEF_MARKER = "typedef"
FUNCTION_MARKER = "FUNCTION"


@dataclass
class ScanState:
    """Cursor for one file. ``bracket_depth`` only moves when tracking is on."""

    path: str
    source_type: str
    track_brackets: bool = False
    line: int = 0
    bracket_depth: int = 0

    def advance(self) -> int:
        self.line += 1
        if self.line == 1:
            self.bracket_depth = 0
        return self.line

    def follow_brackets(self, text: str) -> None:
        if not self.track_brackets:
            return
        depth = self.bracket_depth + text.count("{") - text.count("}")
        self.bracket_depth = max(depth, 0)


def c_category(text: str, bracket_depth: int) -> Optional[str]:
    if DEFINE_MARKER in text:
        return "define"
    if TYPEDEF_MARKER in text:
        return "typedef"
    if bracket_depth == 0:
        return "identifier"
    return None


def fortran_category(text: str) -> Optional[str]:
    if FUNCTION_MARKER in text:
        return "FUNCTION"
    return None


def classify_c_line(text: str, state: ScanState, store: TagStore) -> Optional[str]:
    category = c_category(text, state.bracket_depth)
    if category:
        store.add(category, state.path, text, state.line)
    state.follow_brackets(text)
    return category


def classify_fortran_line(text: str, state: ScanState, store: TagStore) -> Optional[str]:
    category = fortran_category(text)
    if category:
        store.add(category, state.path, text, state.line)
    return category


def classify_line(text: str, state: ScanState, store: TagStore) -> Optional[str]:
    if state.source_type == FORTRAN:
        return classify_fortran_line(text, state, store)
    return classify_c_line(text, state, store)
