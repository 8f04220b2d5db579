"""Risk ratio (cohort) and odds ratio (case-control) with log-scale intervals."""

from statlab.calculators import register
from statlab.formatting import format_ci, format_conf, format_number, format_percent
from statlab.formulas import compute_or, compute_rr, risk, safe_divide
from statlab.models import (
    CalculationResult,
    CalculatorMetadata,
    Category,
    IntervalInput,
    ResultEntry,
)
from statlab.rcode import odds_ratio_r_code, risk_ratio_r_code


def _zero_cell_warning(*cells: float) -> list[str]:
    if min(cells) == 0:
        return ["Table has a zero cell; the interval is unbounded or degenerate."]
    return []


@register(
    CalculatorMetadata(
        id="epi-risk-ratio",
        title="Risk Ratio (RR)",
        category=Category.EPIDEMIOLOGY,
        description="Compares the risk of an event among those exposed to those unexposed.",
        keywords=("RR", "cohort", "risk ratio"),
    ),
    input_model=IntervalInput,
    r_code=risk_ratio_r_code,
    examples=[{"a": 45, "b": 55, "c": 20, "d": 80}],
)
def risk_ratio_calc(params: IntervalInput) -> CalculationResult:
    a, b, c, d = params.a, params.b, params.c, params.d
    res = compute_rr(a, b, c, d, params.conf)

    if res.value > 1:
        comparison = "higher"
    elif res.value < 1:
        comparison = "lower"
    else:
        comparison = "the same"

    return CalculationResult(
        calculator_id="epi-risk-ratio",
        results=[
            ResultEntry(label="Risk Ratio (RR)", value=format_number(res.value, 3), is_main=True),
            ResultEntry(
                label=f"{format_conf(params.conf)}% CI (Log Method)",
                value=format_ci(res.lower, res.upper, 3),
                is_main=True,
            ),
            ResultEntry(label="Exposed Risk", value=format_percent(risk(a, a + b))),
            ResultEntry(label="Unexposed Risk", value=format_percent(risk(c, c + d))),
        ],
        interpretation=f"Exposed group has {comparison} risk (RR={format_number(res.value, 2)}).",
        formula="RR = [a / (a+b)] / [c / (c+d)]",
        warnings=_zero_cell_warning(a, c),
    )


@register(
    CalculatorMetadata(
        id="epi-odds-ratio",
        title="Odds Ratio (OR)",
        category=Category.EPIDEMIOLOGY,
        description="Compares the odds of exposure among cases to the odds of exposure among controls.",
        keywords=("OR", "case-control", "odds"),
    ),
    input_model=IntervalInput,
    r_code=odds_ratio_r_code,
    examples=[{"a": 70, "b": 30, "c": 40, "d": 60}],
)
def odds_ratio_calc(params: IntervalInput) -> CalculationResult:
    a, b, c, d = params.a, params.b, params.c, params.d
    res = compute_or(a, b, c, d, params.conf)

    return CalculationResult(
        calculator_id="epi-odds-ratio",
        results=[
            ResultEntry(label="Odds Ratio (OR)", value=format_number(res.value, 3), is_main=True),
            ResultEntry(
                label=f"{format_conf(params.conf)}% CI (Woolf)",
                value=format_ci(res.lower, res.upper, 3),
                is_main=True,
            ),
            ResultEntry(label="Exposed Odds", value=format_number(safe_divide(a, b), 3)),
            ResultEntry(label="Unexposed Odds", value=format_number(safe_divide(c, d), 3)),
        ],
        interpretation=f"The odds ratio is {format_number(res.value, 3)}.",
        formula="OR = (a * d) / (b * c)",
        warnings=_zero_cell_warning(a, b, c, d),
    )
