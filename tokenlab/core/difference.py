#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tokenlab/core/difference.py

import math

from . import config as c
from .oklch import Oklch


def delta_e_oklch(
    oklch1: Oklch, oklch2: Oklch, lightness_weight: float = c.DEFAULT_LIGHTNESS_WEIGHT
) -> float:
    """
    Calculate the Euclidean distance between two OKLCH colors, treating
    lightness, chroma and hue as plain axes.
    Note: Hue is not wrapped around the circle, and lightness can be
    weighted to favour candidates of similar lightness.
    """
    delta_l = (oklch1.l - oklch2.l) * lightness_weight
    delta_c = oklch1.c - oklch2.c
    delta_h = oklch1.h - oklch2.h
    return math.sqrt(delta_l ** 2 + delta_c ** 2 + delta_h ** 2)
