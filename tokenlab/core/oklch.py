#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tokenlab/core/oklch.py

from decimal import ROUND_HALF_UP, Decimal
from typing import NamedTuple, Optional, Union

from . import config as c

Number = Union[int, float]


class Oklch(NamedTuple):
    """An OKLCH color: lightness (0-1), chroma, hue in degrees."""
    l: Number
    c: Number
    h: Number


def _leading_number(text: str) -> Optional[float]:
    """Reads the numeric prefix of a component, or None if it has none."""
    match = c.NUMBER_PREFIX_RE.match(text)
    if not match:
        return None
    return float(match.group())


def normalize_lightness(value: float) -> Number:
    """
    Rounds lightness to a fixed number of decimals, halves going up, and
    collapses integral results to int, so 1.0 and 1 compare and render the
    same way.
    """
    quantum = Decimal(1).scaleb(-c.LIGHTNESS_DECIMALS)
    value = float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
    if value % 1 == 0:
        return int(value)
    return value


def parse_oklch(value: str) -> Optional[Oklch]:
    """
    Parses a single 'oklch(L C H)' literal.

    Lightness may be a bare number or a percentage. Returns None when the
    string is not an OKLCH literal; callers leave such tokens unchanged.
    """
    match = c.OKLCH_LITERAL_RE.match(value)
    if not match:
        return None
    l_raw, c_raw, h_raw = match.groups()

    lightness = _leading_number(l_raw)
    chroma = _leading_number(c_raw)
    hue = _leading_number(h_raw)
    if lightness is None or chroma is None or hue is None:
        return None

    if l_raw.endswith("%"):
        lightness = lightness / c.PERCENT_TO_FACTOR

    return Oklch(normalize_lightness(lightness), chroma, hue)


def format_number(value: Number) -> str:
    """Shortest decimal form of a number, without a trailing '.0'."""
    if float(value).is_integer():
        return str(int(value))
    return format(Decimal(repr(float(value))), "f")


def format_oklch(color: Oklch) -> str:
    return f"oklch({format_number(color.l)} {format_number(color.c)} {format_number(color.h)})"
