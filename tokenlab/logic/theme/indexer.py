#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tokenlab/logic/theme/indexer.py

from typing import Dict, List, Optional, Tuple

from tokenlab.core import config as c
from tokenlab.core.oklch import Oklch, parse_oklch

ThemeColors = Dict[str, str]
ThemeIndex = List[Tuple[str, Oklch]]


def with_anchors(theme_css: str) -> str:
    """Prefixes the theme with the white and black anchor declarations."""
    return f"{c.ANCHOR_DECLARATIONS}{theme_css}\n"


def parse_theme(theme_css: str, sort: bool = True) -> ThemeColors:
    """
    Extracts '--name: oklch(...)' declarations into a name -> raw value map.

    Later declarations of the same name win. With sort enabled, entries are
    ordered by (name, value) so equidistant nearest matches always resolve
    to the same entry.
    """
    colors: ThemeColors = {}
    for match in c.THEME_DECLARATION_RE.finditer(with_anchors(theme_css)):
        name, value = match.groups()
        colors[name] = value

    if not sort:
        return colors
    # Code point order; equals locale collation for lowercase hyphenated names only
    return dict(sorted(colors.items(), key=lambda item: (item[0], item[1])))


def index_theme(theme_colors: ThemeColors, prefer: Optional[str] = None) -> ThemeIndex:
    """
    Parses every raw value into an OKLCH triple, dropping unparsable ones.
    Entries whose name contains `prefer` are moved ahead of the rest,
    keeping their relative order.
    """
    index: ThemeIndex = []
    for name, value in theme_colors.items():
        parsed = parse_oklch(value)
        if parsed is not None:
            index.append((name, parsed))

    if prefer:
        index.sort(key=lambda entry: prefer not in entry[0])
    return index
