from __future__ import annotations

import argparse
import locale
from typing import Optional

from tagger import DEFAULT_TAGSFILE, TagOptions


def resolve_tagsfile(file_arg: Optional[str], listing: bool) -> Optional[str]:
    if listing:
        return None
    return file_arg or DEFAULT_TAGSFILE


def output_mode(options: TagOptions) -> str:
    return "tags" if options.writes_file else "listing"


def options_from_args(args: argparse.Namespace) -> TagOptions:
    return TagOptions(
        tagsfile=resolve_tagsfile(args.file, args.listing),
        append=args.append,
        listing=args.listing,
        track_brackets=args.track_brackets,
        verbose=args.verbose,
    )


def init_locale() -> None:
    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        pass
