from __future__ import annotations

import locale
import sys
from dataclasses import dataclass, field
from typing import IO, List, Optional, Sequence

from ._fs import open_tags_file, use_surrogateescape
from .emit import write_listing, write_tag_table
from .errors import NoInputFiles, OutputOpenError, TagsError
from .scanner import scan_file
from .store import Compare, TagStore, codepoint_compare
from .utils import progress, report

DEFAULT_TAGSFILE = "tags"


@dataclass
class TagOptions:
    tagsfile: Optional[str] = DEFAULT_TAGSFILE
    append: bool = False
    listing: bool = False
    track_brackets: bool = False
    verbose: bool = False

    @property
    def writes_file(self) -> bool:
        return not self.listing and self.tagsfile is not None


@dataclass
class Tagger:
    """Owns the tag store and the output destination for one run."""

    options: TagOptions
    stdout: IO[str] = field(default_factory=lambda: sys.stdout)
    stderr: IO[str] = field(default_factory=lambda: sys.stderr)
    errors: List[TagsError] = field(default_factory=list)
    store: TagStore = field(init=False)
    output: Optional[IO[str]] = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.store = TagStore(self.collation())

    def collation(self) -> Compare:
        if self.options.writes_file:
            return codepoint_compare
        return locale.strcoll

    def note(self, message: str, done: bool = False) -> None:
        progress(message, done, enabled=self.options.verbose, stream=self.stderr)

    def fail(self, error: TagsError) -> None:
        self.errors.append(error)
        report(error, self.stderr)

    def open_output(self) -> None:
        if not self.options.writes_file:
            self.output = use_surrogateescape(self.stdout)
            return
        path = self.options.tagsfile
        try:
            self.output = open_tags_file(path, append=self.options.append)
        except OSError as exc:
            raise OutputOpenError(path, exc) from exc

    def close_output(self) -> None:
        if self.output is not None and self.output is not self.stdout:
            self.output.close()
        self.output = None

    def add_file(self, path: str) -> bool:
        try:
            count = scan_file(path, self.store, track_brackets=self.options.track_brackets)
        except TagsError as exc:
            self.fail(exc)
            return False
        self.note(f"{path}: {count} lines", done=True)
        return True

    def emit(self) -> int:
        if self.output is None:
            raise RuntimeError("output is not open")
        tags = self.store.traverse()
        if self.options.writes_file:
            return write_tag_table(tags, self.output)
        return write_listing(tags, self.output)

    def run(self, paths: Sequence[str]) -> int:
        if not paths:
            self.fail(NoInputFiles())
            return 1
        try:
            self.open_output()
        except OutputOpenError as exc:
            self.fail(exc)
            return 1
        try:
            self.note(f"Tagging {len(paths)} files...")
            for path in paths:
                self.add_file(path)
            written = self.emit()
            self.note(f"Wrote {written} tags", done=True)
        finally:
            self.close_output()
        return 1 if self.errors else 0


def run_tags(
    paths: Sequence[str],
    options: Optional[TagOptions] = None,
    *,
    stdout: Optional[IO[str]] = None,
    stderr: Optional[IO[str]] = None,
) -> int:
    tagger = Tagger(
        options or TagOptions(),
        stdout=stdout if stdout is not None else sys.stdout,
        stderr=stderr if stderr is not None else sys.stderr,
    )
    return tagger.run(paths)
