#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tokenlab/logic/rewrite/resolver.py

import argparse
import os
import sys
from typing import List

from tokenlab.core import config as c
from tokenlab.shared import files
from tokenlab.shared.logger import log
from tokenlab.logic.theme.indexer import ThemeColors, ThemeIndex, index_theme, parse_theme
from .engine import rewrite_css
from .renderer import render_result, render_summary, render_using


def load_theme(args: argparse.Namespace):
    """Reads and indexes the theme once per invocation, or exits."""
    theme_path = args.theme or files.bundled_theme_path()
    if not os.path.isfile(theme_path):
        log("error", f"theme file not found: {theme_path}")
        sys.exit(c.EXIT_ERROR)

    try:
        with open(theme_path, "r", encoding="utf-8") as f:
            theme_css = f.read()
    except (OSError, UnicodeDecodeError) as e:
        log("error", f"could not read theme file {theme_path}: {e}")
        sys.exit(c.EXIT_ERROR)

    theme_colors = parse_theme(theme_css, sort=not args.no_sort)
    return theme_colors, index_theme(theme_colors, prefer=args.prefer)


def resolve_targets(args: argparse.Namespace, cwd: str) -> List[str]:
    """
    Single-file mode (zero or one path) returns the one file to rewrite or
    exits. Multi-file mode returns every requested path, existing or not.
    """
    if args.all:
        found = files.discover_css_files(cwd, args.ignore_file)
        if not found:
            log("error", "no css files found")
            sys.exit(c.EXIT_ERROR)
        return found

    if len(args.paths) > 1:
        return [os.path.abspath(os.path.join(cwd, p)) for p in args.paths]

    candidate = args.paths[0] if args.paths else None
    found = files.find_input_file(candidate, cwd)
    if found is None:
        log("error", "no valid input file found")
        sys.exit(c.EXIT_ERROR)
    render_using(found, cwd)
    return [found]


def rewrite_file(
    path: str, theme_colors: ThemeColors, index: ThemeIndex, args: argparse.Namespace
) -> bool:
    """Read, transform and overwrite one stylesheet. Returns True if it changed."""
    with open(path, "r", encoding="utf-8", newline="") as f:
        css = f.read()

    output = rewrite_css(
        css,
        theme_colors,
        mode=args.mode,
        index=index,
        lightness_weight=args.lightness_weight,
        emphasize=args.emphasize,
        synonyms=args.synonyms,
        synonym_shade=args.synonym_shade,
    )
    if output == css:
        return False

    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(output)
    return True


def run(args: argparse.Namespace) -> None:
    """Orchestrate theme loading, target resolution and the rewrite loop."""
    cwd = os.getcwd()
    theme_colors, index = load_theme(args)
    targets = resolve_targets(args, cwd)
    multi = len(targets) > 1 or args.all

    updated = 0
    skipped = 0
    for path in targets:
        if not os.path.isfile(path):
            if not multi:
                log("error", f"file not found: {path}")
                sys.exit(c.EXIT_ERROR)
            log("warning", f"skipping {path}: file not found")
            skipped += 1
            continue

        try:
            changed = rewrite_file(path, theme_colors, index, args)
        except (OSError, UnicodeDecodeError) as e:
            if not multi:
                log("error", f"could not rewrite {path}: {e}")
                sys.exit(c.EXIT_ERROR)
            log("warning", f"skipping {path}: {e}")
            skipped += 1
            continue

        render_result(path, cwd, changed)
        updated += int(changed)

    if multi:
        render_summary(updated, len(targets), skipped)
