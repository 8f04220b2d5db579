"""
Shared fixtures for the statlab test suite.

Example usage:
    def test_something(run, entries):
        result = run("chi-square", {"a": 10, "b": 20, "c": 30, "d": 40})
        assert entries(result)["Degrees of Freedom"] == 1
"""

import pytest

from statlab.calculators import run_calculator
from statlab.models import CalculationResult


@pytest.fixture
def run():
    """
    Run a calculator by id on a raw payload.

    Returns:
        Callable[[str, dict], CalculationResult]
    """
    return run_calculator


@pytest.fixture
def entries():
    """
    Map result labels to displayed values.

    Returns:
        Callable[[CalculationResult], dict]
    """

    def _entries(result: CalculationResult) -> dict:
        return {e.label: e.value for e in result.results}

    return _entries


@pytest.fixture
def parse_ci():
    """
    Parse "[lower, upper]" as rendered by format_ci; "∞" becomes inf.

    Returns:
        Callable[[str], tuple[float, float]]
    """

    def _parse(text: str) -> tuple[float, float]:
        lower, upper = text.strip("[]").split(", ")
        return float(lower.replace("∞", "inf")), float(upper.replace("∞", "inf"))

    return _parse
