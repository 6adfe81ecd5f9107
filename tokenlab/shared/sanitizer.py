#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tokenlab/shared/sanitizer.py

import argparse
import re
from typing import Optional, Tuple


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing 
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def _extract_positive_float(value: str) -> Optional[float]:
    """
    Extracts a non-negative floating-point number from a string, keeping
    only the first decimal point encountered.
    """
    if value is None:
        return None

    # Regex [0-9\.] extracts only numeric digits and literal dot (.) characters
    raw_chars = re.findall(r"[0-9\.]", str(value))
    if not raw_chars:
        return None

    clean_str = ""
    dot_seen = False
    for char in raw_chars:
        if char == '.':
            if not dot_seen:
                clean_str += char
                dot_seen = True
        else:
            clean_str += char

    # Return None if string is empty or just a lonely dot
    if not clean_str or clean_str == '.':
        return None

    try:
        return float(clean_str)
    except ValueError:
        return None


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_weight(v: str) -> float:
    """Validator for the lightness weight; must be a positive number."""
    val = _extract_positive_float(v)
    if val is None or val == 0:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid weight value: '{raw}'")
    return val


def handle_family_list(v: str) -> Tuple[str, ...]:
    """
    Validator for a comma separated list of palette family names.
    An empty string yields an empty tuple (reconciliation disabled).
    """
    families = []
    for part in str(v).split(","):
        name = part.strip().lower()
        if not name:
            continue
        # Regex [a-z0-9-] matches the characters allowed in a --color-<family> name
        if not re.fullmatch(r"[a-z0-9-]+", name):
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid family list: '{raw}'")
        families.append(name)
    return tuple(families)


def handle_shade(v: str) -> str:
    """Validator for a palette shade suffix such as '50' or '950'."""
    cleaned = str(v).strip().lower()
    if not re.fullmatch(r"[a-z0-9]+", cleaned):
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid shade: '{raw}'")
    return cleaned


def handle_substring(v: str) -> str:
    """Validator for a name fragment used to prioritize theme entries."""
    cleaned = str(v).strip()
    if not cleaned:
        raise argparse.ArgumentTypeError("empty name fragment")
    return cleaned


def handle_list_format(v: str) -> str:
    """Validator for output format names; strips everything but letters."""
    return "".join(re.findall(r"[a-z]", str(v).replace(" ", "").lower()))


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "weight": handle_weight,
    "families": handle_family_list,
    "shade": handle_shade,
    "prefer": handle_substring,
    "list_format": handle_list_format,
}
