"""Tests for display formatting of numbers, p-values and intervals."""

import math

import pytest

from statlab.formatting import (
    format_ci,
    format_conf,
    format_count,
    format_number,
    format_p,
    format_percent,
)


@pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
def test_non_finite_renders_infinity(value):
    assert format_number(value) == "∞"


def test_format_number_digits():
    assert format_number(3.5, 3) == "3.500"
    assert format_number(0.446428, 4) == "0.4464"


def test_format_p():
    assert format_p(0.0005) == "< 0.001"
    assert format_p(0.001) == "0.0010"
    assert format_p(0.5) == "0.5000"


def test_format_ci():
    assert format_ci(1.23456, math.inf) == "[1.2346, ∞]"
    assert format_ci(0.5, 2.0, 3) == "[0.500, 2.000]"


def test_format_percent():
    assert format_percent(0.45) == "45.00%"
    assert format_percent(0.0) == "0.00%"


def test_format_conf():
    assert format_conf(95.0) == "95"
    assert format_conf(99.9) == "99.9"


def test_format_count():
    assert format_count(10.0) == "10"
    assert format_count(2.5) == "2.5"
    assert format_count(1e12) == "1000000000000"
