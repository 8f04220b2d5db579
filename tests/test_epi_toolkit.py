"""Tests for the combined epi 2x2 toolkit."""

import pytest

EXPECTED_LABELS = [
    "Odds Ratio (Point)",
    "Approximate Exact CI (Fisher-like)",
    "Woolf (Wald) CI",
    "p-value (Association)",
    "Relative Risk (RR)",
    "RR 95% CI (Katz)",
    "p-value (RR)",
    "Risk Difference (RD)",
    "RD 95% CI",
    "p-value (RD)",
]

ZERO_CELL_TABLES = [
    {"a": 2, "b": 18, "c": 0, "d": 20},
    {"a": 0, "b": 10, "c": 5, "d": 5},
    {"a": 7, "b": 0, "c": 3, "d": 9},
    {"a": 4, "b": 6, "c": 8, "d": 0},
    {"a": 0, "b": 0, "c": 0, "d": 0},
]


def test_result_layout(run):
    result = run("ci-epi-2x2", {"a": 20, "b": 80, "c": 10, "d": 90})
    assert [e.label for e in result.results] == EXPECTED_LABELS
    assert [e.label for e in result.results if e.is_main] == [
        "Odds Ratio (Point)",
        "Approximate Exact CI (Fisher-like)",
        "p-value (Association)",
    ]


def test_example_table(run, entries, parse_ci):
    result = run("ci-epi-2x2", {"a": 20, "b": 80, "c": 10, "d": 90, "conf": 95})
    values = entries(result)

    assert values["Odds Ratio (Point)"] == "2.2500"
    exact_lower, exact_upper = parse_ci(values["Approximate Exact CI (Fisher-like)"])
    assert exact_lower == pytest.approx(0.9943, abs=1e-3)
    assert exact_upper == pytest.approx(5.0917, abs=1e-3)

    # Woolf interval is built around the corrected OR (20.5*90.5)/(80.5*10.5)
    woolf_lower, woolf_upper = parse_ci(values["Woolf (Wald) CI"])
    assert woolf_lower < 2.19497 < woolf_upper

    assert values["Relative Risk (RR)"] == "2.0000"
    rr_lower, rr_upper = parse_ci(values["RR 95% CI (Katz)"])
    assert rr_lower < 2.0 < rr_upper

    assert values["Risk Difference (RD)"] == "0.1000"
    assert values["RD 95% CI"] == "[0.0020, 0.1980]"
    assert float(values["p-value (RD)"]) == pytest.approx(0.0458, abs=0.002)

    assert result.interpretation.startswith("The point Odds Ratio is 2.2500 with association p=")
    assert result.warnings == []


def test_exact_interval_uses_raw_counts(run, entries):
    values = entries(run("ci-epi-2x2", {"a": 20, "b": 80, "c": 10, "d": 90}))
    assert values["Approximate Exact CI (Fisher-like)"] != values["Woolf (Wald) CI"]


@pytest.mark.parametrize("table", ZERO_CELL_TABLES)
def test_zero_cell_falls_back_to_woolf(run, entries, table):
    result = run("ci-epi-2x2", table)
    values = entries(result)
    assert values["Approximate Exact CI (Fisher-like)"] == values["Woolf (Wald) CI"]
    assert any("falls back to the Woolf interval" in w for w in result.warnings)


def test_zero_unexposed_events(run, entries):
    values = entries(run("ci-epi-2x2", {"a": 2, "b": 18, "c": 0, "d": 20}))
    assert values["Odds Ratio (Point)"] == "∞"
    assert values["Relative Risk (RR)"] == "∞"
    assert values["RR 95% CI (Katz)"] == "[0.0000, ∞]"
    assert values["p-value (RR)"] == "1.0000"
    assert values["Risk Difference (RD)"] == "0.1000"


def test_no_events_anywhere(run, entries):
    values = entries(run("ci-epi-2x2", {"a": 0, "b": 10, "c": 0, "d": 10}))
    assert values["Relative Risk (RR)"] == "1.0000"
    assert values["Risk Difference (RD)"] == "0.0000"
    assert values["p-value (RD)"] == "1.0000"


def test_strong_association(run, entries):
    values = entries(run("ci-epi-2x2", {"a": 50, "b": 10, "c": 10, "d": 50}))
    assert values["p-value (Association)"] == "< 0.001"


def test_confidence_label(run, entries):
    values = entries(run("ci-epi-2x2", {"a": 20, "b": 80, "c": 10, "d": 90, "conf": 99.9}))
    assert "RR 99.9% CI (Katz)" in values
    assert "RD 99.9% CI" in values
