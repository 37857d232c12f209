from __future__ import annotations

import sys
from typing import IO, TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .errors import TagsError


def progress(
    message: str,
    done: bool = False,
    *,
    enabled: bool = True,
    stream: Optional[IO[str]] = None,
) -> None:
    """Print a progress message to stderr (doesn't interfere with stdout output)."""
    if not enabled:
        return
    out = stream if stream is not None else sys.stderr
    if done:
        print(f"  [done] {message}", file=out)
    else:
        print(f"  [....] {message}", file=out)


def report(error: "TagsError", stream: Optional[IO[str]] = None) -> None:
    print(error.diagnostic(), file=stream if stream is not None else sys.stderr)
