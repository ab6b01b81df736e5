"""Command-line interface for gradlegraph."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from gradlegraph.pipeline import run
from gradlegraph.report import FORMATS


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="gradlegraph",
        description="Inter-module dependency graph, build order and cycle check for Gradle workspaces.",
    )
    parser.add_argument(
        "workspace_dir",
        type=Path,
        help="Root directory of the Gradle workspace",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the report to this file (default: stdout)",
    )
    parser.add_argument(
        "--format",
        choices=FORMATS,
        default="json",
        dest="fmt",
        help="Report format (default: json)",
    )
    parser.add_argument(
        "--module",
        default=None,
        help="Also list the transitive dependencies of this module",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail when a project(...) reference does not resolve to exactly one module",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) output",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(message)s")
    if args.verbose:
        logging.getLogger("gradlegraph").setLevel(logging.DEBUG)

    if not args.workspace_dir.is_dir():
        parser.error(f"not a directory: {args.workspace_dir}")

    sys.exit(
        run(
            args.workspace_dir,
            output=args.output,
            fmt=args.fmt,
            module=args.module,
            strict=args.strict,
        )
    )
