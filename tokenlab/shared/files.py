#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tokenlab/shared/files.py

import fnmatch
import os
from typing import List, Optional

from tokenlab.core import config as c


def bundled_theme_path() -> str:
    """Path of the theme shipped inside the package."""
    return os.path.join(os.path.dirname(os.path.dirname(__file__)), "data", c.THEME_FILE_NAME)


def find_input_file(candidate: Optional[str], cwd: str) -> Optional[str]:
    """
    Returns the first existing file among the given path and the
    conventional stylesheet locations, resolved against cwd.
    """
    candidates = [candidate] if candidate else []
    candidates.extend(c.FALLBACK_FILES)
    for path in candidates:
        full = os.path.join(cwd, path)
        if os.path.isfile(full):
            return os.path.abspath(full)
    return None


def read_ignore_patterns(path: str) -> List[str]:
    """
    Reads .gitignore-style patterns. Blank lines, comments and negated
    patterns ('!') are skipped.
    """
    if not os.path.isfile(path):
        return []
    patterns = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#") or line.startswith("!"):
                continue
            patterns.append(line)
    return patterns


def _match_pattern(rel_path: str, pattern: str, is_dir: bool) -> bool:
    dir_only = pattern.endswith("/")
    pattern = pattern.rstrip("/")
    if dir_only and not is_dir:
        return False

    # Patterns with a slash are anchored to the root, others match any component
    if "/" in pattern:
        return fnmatch.fnmatchcase(rel_path, pattern.lstrip("/"))
    return fnmatch.fnmatchcase(os.path.basename(rel_path), pattern)


def is_ignored(rel_path: str, patterns: List[str], is_dir: bool = False) -> bool:
    """Checks a root-relative, '/'-separated path against ignore patterns."""
    return any(_match_pattern(rel_path, p, is_dir) for p in patterns)


def discover_css_files(root: str, ignore_file: Optional[str] = None) -> List[str]:
    """
    Recursively collects *.css files under root, sorted, skipping anything
    matched by the ignore file and the always-ignored directories.
    """
    root = os.path.abspath(root)
    if ignore_file is None:
        ignore_file = os.path.join(root, c.IGNORE_FILE_NAME)
    patterns = read_ignore_patterns(ignore_file)

    found = []
    for dirpath, dirnames, filenames in os.walk(root):
        rel_dir = os.path.relpath(dirpath, root).replace(os.sep, "/")
        rel_dir = "" if rel_dir == "." else rel_dir + "/"

        # Prune in place so os.walk never descends into ignored directories
        dirnames[:] = sorted(
            d for d in dirnames
            if d not in c.ALWAYS_IGNORED_DIRS
            and not is_ignored(rel_dir + d, patterns, is_dir=True)
        )
        for name in filenames:
            if not fnmatch.fnmatchcase(name, c.CSS_PATTERN):
                continue
            if is_ignored(rel_dir + name, patterns):
                continue
            found.append(os.path.join(dirpath, name))

    return sorted(found)
