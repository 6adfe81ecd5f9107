#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tokenlab/logic/rewrite/engine.py

import re
from typing import Optional, Sequence

from tokenlab.core import config as c
from tokenlab.core.difference import delta_e_oklch
from tokenlab.core.oklch import Oklch, format_oklch, parse_oklch
from tokenlab.logic.theme.indexer import ThemeColors, ThemeIndex, index_theme


def find_exact(target: Oklch, index: ThemeIndex) -> Optional[str]:
    """Name of the first theme entry whose triple equals the target."""
    for name, color in index:
        if color == target:
            return name
    return None


def find_closest(
    target: Oklch, index: ThemeIndex, lightness_weight: float = c.DEFAULT_LIGHTNESS_WEIGHT
) -> Optional[str]:
    """
    Name of the theme entry nearest to the target. On equal distances the
    entry met first in scan order wins.
    """
    best_name = None
    best_distance = None
    for name, color in index:
        distance = delta_e_oklch(color, target, lightness_weight)
        if best_distance is None or distance < best_distance:
            best_name = name
            best_distance = distance
    return best_name


def _annotate_literal(
    token: str, index: ThemeIndex, lightness_weight: float, emphasize: bool
) -> Optional[str]:
    target = parse_oklch(token)
    if target is None:
        return None

    name = find_exact(target, index)
    if name is not None:
        return c.EXACT_COMMENT.format(token=token, name=name)

    name = find_closest(target, index, lightness_weight)
    if name is None:
        return None
    template = c.CLOSE_COMMENT_EMPHASIZED if emphasize else c.CLOSE_COMMENT
    return template.format(token=token, name=name)


def _expand_reference(token: str, theme_colors: ThemeColors) -> Optional[str]:
    match = c.VAR_NAME_RE.match(token)
    if not match:
        return None
    name = match.group(1)
    value = theme_colors.get(name)
    parsed = parse_oklch(value) if value else None
    if parsed is None:
        return None
    return c.EXACT_COMMENT.format(token=format_oklch(parsed), name=name)


def annotate_css(
    css: str,
    theme_colors: ThemeColors,
    index: Optional[ThemeIndex] = None,
    lightness_weight: float = c.DEFAULT_LIGHTNESS_WEIGHT,
    emphasize: bool = False,
) -> str:
    """
    Comment-annotation rewrite.

    Every oklch() literal gets a trailing '/* <name> */' for its exact theme
    match, or '/* close to <name> */' for the nearest one. Every known
    var(--color-*) reference is expanded to its oklch() literal with the
    variable name as comment.

    Once a token is rewritten, the rest of its source line up to the newline
    is dropped, including any further tokens on it. Tokens left unchanged
    keep their line intact.
    """
    if index is None:
        index = index_theme(theme_colors)

    parts = []
    last = 0
    for match in c.TOKEN_RE.finditer(css):
        start, end = match.span()
        if start < last:
            # Inside the dropped remainder of an already rewritten line
            continue

        token = match.group()
        if token.startswith("oklch("):
            replacement = _annotate_literal(token, index, lightness_weight, emphasize)
        else:
            replacement = _expand_reference(token, theme_colors)

        parts.append(css[last:start])
        if replacement is None:
            parts.append(token)
            last = end
            continue

        parts.append(replacement)
        newline = css.find("\n", end)
        if newline == -1:
            last = len(css)
        else:
            parts.append("\r\n" if newline > end and css[newline - 1] == "\r" else "\n")
            last = newline + 1

    parts.append(css[last:])
    return "".join(parts)


def substitute_css(
    css: str, theme_colors: ThemeColors, index: Optional[ThemeIndex] = None
) -> str:
    """
    Variable-substitution rewrite: every oklch() literal with an exact theme
    match becomes var(<name>). Everything else is left as is, so running it
    twice gives the same result as running it once.
    """
    if index is None:
        index = index_theme(theme_colors)

    def _replace(match: "re.Match") -> str:
        token = match.group()
        target = parse_oklch(token)
        if target is None:
            return token
        name = find_exact(target, index)
        return f"var({name})" if name is not None else token

    return c.OKLCH_TOKEN_RE.sub(_replace, css)


def reconcile_synonyms(
    css: str,
    families: Sequence[str] = c.DEFAULT_SYNONYMS,
    shade: str = c.DEFAULT_SYNONYM_SHADE,
) -> str:
    """
    Settles theme aliases that share a color (e.g. zinc-50 and neutral-50).

    Counts whole-word uses of each family in the text; the most used one
    wins, ties going to the family listed first. Every '<family>-<shade>'
    comment of any listed family is rewritten to the winner.
    """
    if not families:
        return css

    counts = [len(re.findall(rf"\b{re.escape(family)}\b", css, re.ASCII)) for family in families]
    winner = families[counts.index(max(counts))]

    alternatives = "|".join(re.escape(family) for family in families)
    pattern = re.compile(rf"/\* --color-({alternatives})-{re.escape(shade)} \*/")
    return pattern.sub(f"/* --color-{winner}-{shade} */", css)


def rewrite_css(
    css: str,
    theme_colors: ThemeColors,
    mode: str = c.MODE_COMMENT,
    index: Optional[ThemeIndex] = None,
    lightness_weight: float = c.DEFAULT_LIGHTNESS_WEIGHT,
    emphasize: bool = False,
    synonyms: Sequence[str] = c.DEFAULT_SYNONYMS,
    synonym_shade: str = c.DEFAULT_SYNONYM_SHADE,
) -> str:
    """Runs the rewrite for the given mode over one stylesheet."""
    if mode == c.MODE_VAR:
        return substitute_css(css, theme_colors, index)

    if mode != c.MODE_COMMENT:
        raise ValueError(f"unknown rewrite mode: '{mode}'")

    output = annotate_css(
        css,
        theme_colors,
        index=index,
        lightness_weight=lightness_weight,
        emphasize=emphasize,
    )
    return reconcile_synonyms(output, synonyms, synonym_shade)
