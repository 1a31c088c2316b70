#!/usr/bin/env python3
"""
pngcrop command-line entry point.

    pngcrop [options] <file>...
    pngcrop -o <output> <source>
    pngcrop -h | --help
"""
from __future__ import annotations
import argparse
import logging
from typing import List, Optional

from .. import settings
from ..models.classification import ClassificationMode
from ..models.naming_policy import NamingPolicy
from ..pipeline.batch_crop import crop_files
from ..services.path_resolver import PathResolver


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="pngcrop",
        description="Crop PNG files to their minimal bounding box",
    )
    ap.add_argument("files", nargs="+", metavar="file",
                    help="images (or directories of images) to crop")
    ap.add_argument("-o", "--output", metavar="file",
                    help="write the result here instead (exactly one source)")
    ap.add_argument("-m", "--mode", choices=[m.value for m in ClassificationMode],
                    default=settings.DEFAULT_MODE,
                    help="alpha: crop fully transparent pixels; "
                         "sample: crop pixels equal to the corner background "
                         "(default: %(default)s)")
    ap.add_argument("-p", "--prefix",
                    help="write each result to PREFIX + input path")
    ap.add_argument("-r", "--recursive", action="store_true",
                    help="recurse into directory arguments")
    ap.add_argument("--no-progress", action="store_true",
                    help="disable the progress bar")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="debug logging")
    return ap


def _log_level(verbose: bool):
    if verbose:
        return logging.DEBUG
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown PNGCROP_LOG_LEVEL: {settings.LOG_LEVEL}")
    return level


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    if args.output is not None and len(args.files) != 1:
        ap.error("-o/--output takes exactly one source")
    if args.output is not None and args.prefix is not None:
        ap.error("-o/--output and -p/--prefix are mutually exclusive")

    try:
        # --- Centralized Logging Configuration ---
        logging.basicConfig(
            level=_log_level(args.verbose),
            format=settings.LOG_FORMAT,
            datefmt=settings.LOG_DATEFMT,
        )
        if args.prefix is not None:
            resolver = PathResolver(NamingPolicy.PREFIXED, prefix=args.prefix)
        else:
            resolver = PathResolver()
        crop_files(
            args.files,
            mode=ClassificationMode(args.mode),
            explicit_output=args.output,
            resolver=resolver,
            recursive=args.recursive,
            show_progress=not args.no_progress,
        )
    except ValueError as err:
        # bad PNGCROP_* settings, or a directory expanded to several files next to -o
        ap.error(str(err))
    # per-file failures are reported as they happen and do not change the exit code
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
