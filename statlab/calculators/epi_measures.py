"""Relative risk and odds ratio point estimates side by side."""

from statlab.calculators import register
from statlab.formatting import format_number
from statlab.formulas import odds_ratio, risk_ratio
from statlab.models import (
    CalculationResult,
    CalculatorMetadata,
    Category,
    ResultEntry,
    TwoByTwoInput,
)
from statlab.rcode import epi_measures_r_code

_ID = "epi-measures"


@register(
    CalculatorMetadata(
        id=_ID,
        title="Relative Risk & Odds Ratio",
        category=Category.EPIDEMIOLOGY,
        description="Calculate risk and odds measures from a 2x2 contingency table.",
        keywords=("RR", "OR", "Risk", "Epidemiology", "2x2"),
    ),
    input_model=TwoByTwoInput,
    r_code=epi_measures_r_code,
    examples=[{"a": 20, "b": 80, "c": 10, "d": 90}],
)
def epi_measures(params: TwoByTwoInput) -> CalculationResult:
    rr = risk_ratio(params.a, params.b, params.c, params.d)
    or_ = odds_ratio(params.a, params.b, params.c, params.d)

    return CalculationResult(
        calculator_id=_ID,
        results=[
            ResultEntry(label="Relative Risk (RR)", value=format_number(rr, 3), is_main=True),
            ResultEntry(label="Odds Ratio (OR)", value=format_number(or_, 3), is_main=True),
        ],
        interpretation=f"RR is {format_number(rr, 2)}, OR is {format_number(or_, 2)}.",
        formula="RR = [a/(a+b)] / [c/(c+d)]\nOR = (a*d) / (b*c)",
    )
