#!/usr/bin/env python3
"""ctags CLI: scan C and FORTRAN sources and write a sorted tags index."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence

from tagger import AllocationFailure, run_tags
from tagger.utils import progress, report
from .config import init_locale, options_from_args, output_mode


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ctags", description="Create a tags file from C and FORTRAN sources"
    )
    parser.add_argument(
        "-a", "--append", action="store_true", help="Append to the tags file instead of replacing it"
    )
    parser.add_argument(
        "-f",
        "--file",
        default=None,
        metavar="TAGSFILE",
        help="Write tags to TAGSFILE (default: tags)",
    )
    parser.add_argument(
        "-x",
        "--listing",
        action="store_true",
        help="Print a listing to stdout instead of writing a tags file",
    )
    parser.add_argument(
        "-b",
        "--track-brackets",
        action="store_true",
        help="Skip identifier tags on lines inside { } blocks",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Print progress to stderr"
    )
    parser.add_argument("files", nargs="*", metavar="file", help="Source files (.c, .h, .f)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else sys.argv[1:])
    init_locale()
    options = options_from_args(args)
    files: List[str] = args.files
    progress(f"Output mode: {output_mode(options)}", enabled=options.verbose)
    try:
        return run_tags(files, options)
    except MemoryError:
        report(AllocationFailure())
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
