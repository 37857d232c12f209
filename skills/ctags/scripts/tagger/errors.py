from __future__ import annotations

from typing import Optional

TOOL_NAME = "ctags"


class TagsError(Exception):
    """A reportable failure; ``str()`` is the diagnostic without the tool prefix."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path

    def diagnostic(self) -> str:
        return f"{TOOL_NAME}: {self}"


class NoInputFiles(TagsError):
    def __init__(self) -> None:
        super().__init__("At least one file must be specified")


class UnknownExtension(TagsError):
    def __init__(self, path: str) -> None:
        super().__init__(
            f"Don't know how to process files without an extension ({path})", path
        )


class UnsupportedExtension(TagsError):
    def __init__(self, path: str, extension: str) -> None:
        super().__init__(
            f"Don't know how to process files with extension '{extension}' ({path})", path
        )
        self.extension = extension


class FileOpenError(TagsError):
    def __init__(self, path: str, cause: OSError) -> None:
        reason = cause.strerror or str(cause)
        super().__init__(f"Couldn't open {path}: {reason}", path)
        self.cause = cause


class OutputOpenError(FileOpenError):
    """The tags file could not be opened; nothing can be written."""


class AllocationFailure(TagsError):
    def __init__(self) -> None:
        super().__init__("Out of memory")
