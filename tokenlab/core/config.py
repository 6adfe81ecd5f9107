#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tokenlab/core/config.py

import re

# ==========================================
# Token Grammar
# ==========================================

# Digit and name classes are ASCII only

# A single oklch() literal, whitespace tolerant (used on theme values and scanned tokens)
OKLCH_LITERAL_RE = re.compile(r"^oklch\(\s*([0-9.]+%?)\s+([0-9.]+)\s+([0-9.]+)\s*\)$")

# Leading numeric prefix of a captured component ("1.2.3" reads as 1.2)
NUMBER_PREFIX_RE = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")

# Custom property declarations in a theme: --name: oklch(...)
THEME_DECLARATION_RE = re.compile(r"(--[A-Za-z0-9_-]+):\s*(oklch\([^)]+\))")

# Tokens scanned in target CSS (single spaces only, unlike the literal parser)
OKLCH_TOKEN_PATTERN = r"oklch\(([0-9.]+%|[0-9.]+) [0-9.]+ [0-9.]+\)"
VAR_TOKEN_PATTERN = r"var\(--color-[a-z0-9-]+\)"
OKLCH_TOKEN_RE = re.compile(OKLCH_TOKEN_PATTERN)
TOKEN_RE = re.compile(f"{OKLCH_TOKEN_PATTERN}|{VAR_TOKEN_PATTERN}")

# Variable name inside a var() reference
VAR_NAME_RE = re.compile(r"var\((--color-[a-zA-Z0-9-]+)\)")

# ==========================================
# Theme Defaults
# ==========================================

# Always prepended to the theme text, so every later declaration overrides them
ANCHOR_DECLARATIONS = """
--color-white: oklch(100% 0 0);
--color-black: oklch(0% 0 0);
"""

LIGHTNESS_DECIMALS = 3             # Lightness is rounded to this many places
PERCENT_TO_FACTOR = 100.0          # Divisor for percentage lightness
DEFAULT_LIGHTNESS_WEIGHT = 1.0     # Lightness axis multiplier in nearest-match distance

# Theme aliases that resolve to the same color; the most used family wins
DEFAULT_SYNONYMS = ("zinc", "neutral")
DEFAULT_SYNONYM_SHADE = "50"

# ==========================================
# Rewrite Modes & Comments
# ==========================================

MODE_COMMENT = "comment"
MODE_VAR = "var"
MODES = [MODE_COMMENT, MODE_VAR]

EXACT_COMMENT = "{token}; /* {name} */"
CLOSE_COMMENT = "{token}; /* close to {name} */"
CLOSE_COMMENT_EMPHASIZED = "{token}; /* ⚠ close to {name} */"

# ==========================================
# File Discovery
# ==========================================

THEME_FILE_NAME = "theme.css"
IGNORE_FILE_NAME = ".gitignore"
CSS_PATTERN = "*.css"

# Conventional locations tried after the positional path, in order
FALLBACK_FILES = [
    "src/app/globals.css",
    "app/globals.css",
    "globals.css",
]

# Never descended into during --all discovery
ALWAYS_IGNORED_DIRS = ["node_modules", ".git"]

LIST_FORMATS = ["text", "json", "prettyjson"]

# ==========================================
# CLI UI
# ==========================================

EXIT_OK = 0
EXIT_ERROR = 1

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
