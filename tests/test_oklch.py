"""Tests for OKLCH literal parsing, formatting and distance."""

import pytest

from tokenlab.core.difference import delta_e_oklch
from tokenlab.core.oklch import Oklch, format_number, format_oklch, normalize_lightness, parse_oklch


# --- parse_oklch ---

def test_percentage_lightness_is_divided_by_100():
    assert parse_oklch("oklch(50% 0.2 30)") == Oklch(0.5, 0.2, 30)


def test_percentage_and_fraction_forms_are_equal():
    assert parse_oklch("oklch(60% 0.15 250)") == parse_oklch("oklch(0.6 0.15 250)")


def test_integral_lightness_collapses_to_int():
    color = parse_oklch("oklch(100% 0 0)")
    assert color.l == 1
    assert isinstance(color.l, int)


def test_lightness_rounded_to_three_decimals():
    assert parse_oklch("oklch(0.12345 0.1 10)").l == 0.123
    assert parse_oklch("oklch(12.3456% 0.1 10)").l == 0.123


def test_chroma_and_hue_are_not_rounded():
    color = parse_oklch("oklch(0.5 0.12345 123.4567)")
    assert color.c == 0.12345
    assert color.h == 123.4567


def test_whitespace_inside_parentheses_is_tolerated():
    assert parse_oklch("oklch(  0.5   0.2 30 )") == Oklch(0.5, 0.2, 30)


def test_repeated_dots_read_the_leading_number():
    assert parse_oklch("oklch(0.5.1 0.2 30)") == Oklch(0.5, 0.2, 30)


@pytest.mark.parametrize(
    "value",
    [
        "rgb(0 0 0)",
        "oklch(0.5 0.2)",
        "oklch(0.5 0.2 30 / 0.5)",
        "oklch(. 0.2 30)",
        "oklch(0.5 20% 30)",
        "color: oklch(0.5 0.2 30)",
        "",
    ],
)
def test_non_literals_return_none(value):
    assert parse_oklch(value) is None


def test_normalize_lightness():
    assert normalize_lightness(0.9999) == 1
    assert normalize_lightness(0.25) == 0.25


def test_halfway_lightness_rounds_up():
    assert normalize_lightness(0.0625) == 0.063
    assert parse_oklch("oklch(6.25% 0 0)").l == 0.063


@pytest.mark.parametrize(
    "value",
    ["oklch(\u0661 0 0)", "oklch(0.5 \u0660 0)", "oklch(\uff10.5 0 0)"],
)
def test_non_ascii_digits_are_rejected(value):
    assert parse_oklch(value) is None


# --- formatting ---

def test_format_number_drops_trailing_zero():
    assert format_number(250.0) == "250"
    assert format_number(0) == "0"
    assert format_number(0.15) == "0.15"


def test_format_number_never_uses_exponent():
    assert format_number(0.00001) == "0.00001"


def test_format_oklch():
    assert format_oklch(Oklch(0.6, 0.15, 250.0)) == "oklch(0.6 0.15 250)"
    assert format_oklch(parse_oklch("oklch(100% 0 0)")) == "oklch(1 0 0)"


# --- delta_e_oklch ---

def test_distance_of_identical_colors_is_zero():
    color = Oklch(0.5, 0.1, 200)
    assert delta_e_oklch(color, color) == 0


def test_distance_is_euclidean():
    assert delta_e_oklch(Oklch(0.5, 0, 0), Oklch(0.5, 0, 4)) == pytest.approx(4)
    assert delta_e_oklch(Oklch(0, 0, 3), Oklch(0, 0, 0)) == pytest.approx(3)


def test_lightness_weight_scales_lightness_axis_only():
    a = Oklch(0.5, 0, 10)
    b = Oklch(0.6, 0, 10)
    assert delta_e_oklch(a, b, lightness_weight=10) == pytest.approx(1)
    assert delta_e_oklch(Oklch(0.5, 0, 10), Oklch(0.5, 0, 12), lightness_weight=10) == pytest.approx(2)
