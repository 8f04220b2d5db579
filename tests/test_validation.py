"""Tests for input preconditions and the validation outcome."""

import pytest

from statlab.models import ChiSquareInput, IntervalInput
from statlab.validation import FieldError, validate_input


def test_valid_payload():
    outcome = validate_input(IntervalInput, {"a": 1, "b": 2, "c": 3, "d": 4, "conf": 90})
    assert outcome.ok
    assert isinstance(outcome.values, IntervalInput)
    assert outcome.values.conf == 90
    assert outcome.errors == ()


def test_default_confidence():
    outcome = validate_input(IntervalInput, {"a": 1, "b": 2, "c": 3, "d": 4})
    assert outcome.values.conf == 95.0


def test_default_yates_off():
    outcome = validate_input(ChiSquareInput, {"a": 1, "b": 2, "c": 3, "d": 4})
    assert outcome.values.yates is False


def test_negative_count():
    outcome = validate_input(IntervalInput, {"a": -1, "b": 0, "c": 0, "d": 0})
    assert not outcome.ok
    assert outcome.values is None
    assert outcome.errors == (FieldError(field="a", message="Count cannot be negative"),)
    assert outcome.messages == ["a: Count cannot be negative"]


def test_every_bad_field_reported():
    outcome = validate_input(IntervalInput, {"a": -1, "b": -2, "c": 0, "d": 0, "conf": 50})
    assert [e.field for e in outcome.errors] == ["a", "b", "conf"]


def test_confidence_bounds():
    assert validate_input(IntervalInput, {"a": 0, "b": 0, "c": 0, "d": 0, "conf": 80}).ok
    assert validate_input(IntervalInput, {"a": 0, "b": 0, "c": 0, "d": 0, "conf": 99.9}).ok
    outcome = validate_input(IntervalInput, {"a": 0, "b": 0, "c": 0, "d": 0, "conf": 99.95})
    assert not outcome.ok
    assert outcome.errors[0].field == "conf"
    assert "between 80 and 99.9" in outcome.errors[0].message


def test_missing_field():
    outcome = validate_input(IntervalInput, {"a": 1, "b": 2, "c": 3})
    assert [e.field for e in outcome.errors] == ["d"]


def test_non_numeric_count():
    outcome = validate_input(IntervalInput, {"a": "many", "b": 2, "c": 3, "d": 4})
    assert not outcome.ok
    assert outcome.errors[0].field == "a"


def test_fractional_counts_accepted():
    outcome = validate_input(IntervalInput, {"a": 2.5, "b": 1, "c": 0.5, "d": 1})
    assert outcome.ok
    assert outcome.values.a == 2.5
    assert outcome.values.c == 0.5


def test_count_cap_is_inclusive():
    assert validate_input(IntervalInput, {"a": 1e12, "b": 1, "c": 1, "d": 1}).ok


@pytest.mark.parametrize("huge", [10**400, 10**13, 1e13, 1e300])
def test_oversized_count_rejected(huge):
    outcome = validate_input(ChiSquareInput, {"a": huge, "b": 1, "c": 1, "d": 1})
    assert not outcome.ok
    assert outcome.errors == (FieldError(field="a", message="Count cannot exceed 1e+12"),)


def test_huge_negative_count_rejected():
    outcome = validate_input(IntervalInput, {"a": -(10**400), "b": 1, "c": 1, "d": 1})
    assert outcome.errors == (FieldError(field="a", message="Count cannot be negative"),)
