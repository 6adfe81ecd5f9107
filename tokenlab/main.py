#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tokenlab/main.py

import argparse
import sys
from typing import List, Optional

from tokenlab import __version__
from tokenlab.core import config as c
from tokenlab.logic.rewrite import resolver
from tokenlab.logic.theme.renderer import render_theme
from tokenlab.shared.logger import TokenlabArgumentParser
from tokenlab.shared.sanitizer import INPUT_HANDLERS


def get_parser() -> argparse.ArgumentParser:
    """Create argument parser for the tokenlab command."""
    parser = TokenlabArgumentParser(
        prog="tokenlab",
        description=(
            "tokenlab: annotate or replace oklch() colors in css files\n"
            "with the matching custom properties of a theme"
        ),
        epilog=(
            "without paths, the first existing of src/app/globals.css,\n"
            "app/globals.css and globals.css is used"
        ),
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"tokenlab@{__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="input.css",
        help="css files to rewrite in place",
    )
    parser.add_argument(
        "-m",
        "--mode",
        default=c.MODE_COMMENT,
        choices=c.MODES,
        help=(
            "comment: append the matching (or closest) theme name as a comment\n"
            "var: replace exact matches with var(--name) (default: comment)"
        ),
    )
    parser.add_argument(
        "-t",
        "--theme",
        default=None,
        help="theme css with --name: oklch(...) declarations (default: bundled)",
    )
    parser.add_argument(
        "--list-theme",
        nargs="?",
        const="text",
        default=None,
        choices=c.LIST_FORMATS,
        type=INPUT_HANDLERS["list_format"],
        help="list the indexed theme colors and exit",
    )

    # Target Discovery Group
    discovery_group = parser.add_argument_group("file discovery")
    discovery_group.add_argument(
        "-a",
        "--all",
        action="store_true",
        help="rewrite every **/*.css under the current directory",
    )
    discovery_group.add_argument(
        "--ignore-file",
        default=None,
        help=f"ignore patterns for --all (default: {c.IGNORE_FILE_NAME})",
    )

    # Matching Group
    match_group = parser.add_argument_group("matching")
    match_group.add_argument(
        "-w",
        "--lightness-weight",
        type=INPUT_HANDLERS["weight"],
        default=c.DEFAULT_LIGHTNESS_WEIGHT,
        help="lightness multiplier for closest-color distance (default: 1)",
    )
    match_group.add_argument(
        "-p",
        "--prefer",
        type=INPUT_HANDLERS["prefer"],
        default=None,
        help="try theme names containing this fragment first (e.g. neutral)",
    )
    match_group.add_argument(
        "-e",
        "--emphasize",
        action="store_true",
        help="mark closest-color comments with a warning sign",
    )
    match_group.add_argument(
        "--no-sort",
        action="store_true",
        help="keep theme declaration order instead of sorting by name",
    )
    match_group.add_argument(
        "--synonyms",
        type=INPUT_HANDLERS["families"],
        default=c.DEFAULT_SYNONYMS,
        help=(
            "comma separated palette families sharing a shade; the most used\n"
            f"one names all of them ('' disables, default: {','.join(c.DEFAULT_SYNONYMS)})"
        ),
    )
    match_group.add_argument(
        "--synonym-shade",
        type=INPUT_HANDLERS["shade"],
        default=c.DEFAULT_SYNONYM_SHADE,
        help=f"shade reconciled between synonym families (default: {c.DEFAULT_SYNONYM_SHADE})",
    )
    return parser


def handle_command(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Entry point for the rewrite command."""
    if args.list_theme:
        _, index = resolver.load_theme(args)
        render_theme(index, args.list_theme)
        sys.exit(c.EXIT_OK)

    if args.all and args.paths:
        parser.error("--all cannot be combined with input paths")

    resolver.run(args)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for tokenlab CLI"""
    parser = get_parser()
    args = parser.parse_args(argv)
    handle_command(args, parser)
    sys.exit(c.EXIT_OK)


if __name__ == "__main__":
    main()
