#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tokenlab/logic/theme/renderer.py

import json

from tokenlab.core import config as c
from tokenlab.core.oklch import format_oklch
from .indexer import ThemeIndex


def render_theme(index: ThemeIndex, fmt: str = "text") -> None:
    """Print the indexed theme in scan order."""
    if fmt in ("json", "prettyjson"):
        data = [
            {"name": name, "l": color.l, "c": color.c, "h": color.h}
            for name, color in index
        ]
        indent = 2 if fmt == "prettyjson" else None
        print(json.dumps(data, indent=indent))
        return

    width = max((len(name) for name, _ in index), default=0)
    for name, color in index:
        print(f"{c.BOLD_WHITE}{name:<{width}}{c.RESET}  {format_oklch(color)}")
