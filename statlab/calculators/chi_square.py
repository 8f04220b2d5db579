"""Chi-square test of independence for a 2x2 table."""

import logging

from statlab.calculators import register
from statlab.distributions import chi_square_p_value
from statlab.formatting import format_p
from statlab.formulas import chi_square_2x2, expected_counts
from statlab.models import (
    CalculationResult,
    CalculatorMetadata,
    Category,
    ChiSquareInput,
    ResultEntry,
)
from statlab.rcode import chi_square_r_code

log = logging.getLogger(__name__)

_ID = "chi-square"

# Expected counts below this make the chi-square approximation unreliable
_MIN_EXPECTED = 5

METADATA = CalculatorMetadata(
    id=_ID,
    title="Chi-Square Test (2x2)",
    category=Category.HYPOTHESIS_TESTS,
    description="Test for independence in a 2x2 contingency table with calculated p-value and Yates correction.",
    keywords=("chi-square", "independence", "nominal", "yates", "p-value"),
)


@register(
    METADATA,
    input_model=ChiSquareInput,
    r_code=chi_square_r_code,
    examples=[{"a": 10, "b": 20, "c": 30, "d": 40, "yates": True}],
)
def chi_square(params: ChiSquareInput) -> CalculationResult:
    a, b, c, d = params.a, params.b, params.c, params.d
    stat = chi_square_2x2(a, b, c, d, yates=params.yates)

    if stat is None:
        log.info("Chi-square skipped: zero row or column total in %s", (a, b, c, d))
        return CalculationResult(
            calculator_id=_ID,
            results=[],
            interpretation="Table contains a row or column with zero totals.",
        )

    chi2 = stat.statistic
    p_value = chi_square_p_value(chi2, 1)

    warnings: list[str] = []
    min_expected = float(expected_counts(a, b, c, d).min())
    if min_expected < _MIN_EXPECTED:
        warnings.append(
            f"Smallest expected cell count is {min_expected:.2f} (< {_MIN_EXPECTED}); "
            "consider Fisher's exact test."
        )

    return CalculationResult(
        calculator_id=_ID,
        results=[
            ResultEntry(label="Chi-Square (χ²)", value=f"{chi2:.4f}", is_main=True),
            ResultEntry(label="p-value", value=format_p(p_value), is_main=True),
            ResultEntry(label="Degrees of Freedom", value=1),
            ResultEntry(label="Yates Correction", value="Applied" if params.yates else "Not Applied"),
        ],
        interpretation=f"The Chi-square value is {chi2:.3f} (p = {format_p(p_value)}).",
        formula="χ² = n(|ad-bc| - c)² / (R1*R2*C1*C2)",
        warnings=warnings,
    )
