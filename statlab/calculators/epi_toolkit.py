"""Epi 2x2 toolkit: OR (exact-like and Woolf intervals), RR, RD and p-values.

The OR point estimate uses the raw counts while the Woolf interval and the
association p-value use Haldane-Anscombe corrected counts (each cell + 0.5).
The mismatch is intentional and kept as is.
"""

import logging
import math

from statlab.calculators import register
from statlab.distributions import LARGE_SAMPLE_DF, t_p_value, z_critical
from statlab.formatting import format_ci, format_conf, format_number, format_p
from statlab.formulas import (
    INF,
    katz_se,
    log_estimate_p_value,
    log_interval,
    risk,
    risk_ratio,
    woolf_se,
)
from statlab.models import (
    CalculationResult,
    CalculatorMetadata,
    Category,
    IntervalInput,
    ResultEntry,
)
from statlab.rcode import epi_toolkit_r_code

log = logging.getLogger(__name__)

_ID = "ci-epi-2x2"

# Haldane-Anscombe continuity correction
_CORRECTION = 0.5


@register(
    CalculatorMetadata(
        id=_ID,
        title="Epi 2x2 CI Toolkit",
        category=Category.CONFIDENCE_INTERVALS,
        description="Odds Ratio (Fisher Exact & Woolf), Relative Risk, and Risk Difference with p-values.",
        keywords=("OR", "RR", "Risk", "Epidemiology", "Woolf", "Fisher Exact", "p-value"),
    ),
    input_model=IntervalInput,
    r_code=epi_toolkit_r_code,
    examples=[
        {"a": 20, "b": 80, "c": 10, "d": 90, "conf": 95},
        {"a": 2, "b": 18, "c": 0, "d": 20, "conf": 95},
    ],
)
def epi_toolkit(params: IntervalInput) -> CalculationResult:
    a, b, c, d = params.a, params.b, params.c, params.d
    z = z_critical(params.conf)
    conf_label = format_conf(params.conf)
    warnings: list[str] = []

    # Odds ratio
    or_point = (a * d) / (b * c) if b != 0 and c != 0 else INF

    ac, bc, cc, dc = (x + _CORRECTION for x in (a, b, c, d))
    or_corrected = (ac * dc) / (bc * cc)
    se_log_or = woolf_se(ac, bc, cc, dc)
    woolf_lower, woolf_upper = log_interval(or_corrected, se_log_or, z)
    woolf_p = log_estimate_p_value(or_corrected, se_log_or)

    if min(a, b, c, d) > 0:
        exact_lower, exact_upper = log_interval(or_point, woolf_se(a, b, c, d), z)
    else:
        exact_lower, exact_upper = woolf_lower, woolf_upper
        warnings.append("Zero cell present; the exact-like OR interval falls back to the Woolf interval.")
        log.info("Zero cell in %s, using Woolf bounds for exact-like interval", (a, b, c, d))

    # Risk ratio, Katz SE on corrected counts
    r1 = risk(a, a + b)
    r2 = risk(c, c + d)
    rr = risk_ratio(a, b, c, d)
    rr_se_log = katz_se(ac, bc, cc, dc)
    rr_lower, rr_upper = log_interval(rr, rr_se_log, z)
    rr_p = log_estimate_p_value(rr, rr_se_log)

    # Risk difference, Wald interval
    rd = r1 - r2
    se_rd = math.sqrt((r1 * (1 - r1)) / ((a + b) or 1) + (r2 * (1 - r2)) / ((c + d) or 1))
    rd_lower = rd - z * se_rd
    rd_upper = rd + z * se_rd
    rd_p = t_p_value(0.0 if se_rd == 0 else rd / se_rd, LARGE_SAMPLE_DF).two_sided

    f = format_number
    return CalculationResult(
        calculator_id=_ID,
        results=[
            ResultEntry(label="Odds Ratio (Point)", value=f(or_point), is_main=True),
            ResultEntry(label="Approximate Exact CI (Fisher-like)", value=format_ci(exact_lower, exact_upper), is_main=True),
            ResultEntry(label="Woolf (Wald) CI", value=format_ci(woolf_lower, woolf_upper)),
            ResultEntry(label="p-value (Association)", value=format_p(woolf_p), is_main=True),
            ResultEntry(label="Relative Risk (RR)", value=f(rr)),
            ResultEntry(label=f"RR {conf_label}% CI (Katz)", value=format_ci(rr_lower, rr_upper)),
            ResultEntry(label="p-value (RR)", value=format_p(rr_p)),
            ResultEntry(label="Risk Difference (RD)", value=f(rd)),
            ResultEntry(label=f"RD {conf_label}% CI", value=format_ci(rd_lower, rd_upper)),
            ResultEntry(label="p-value (RD)", value=format_p(rd_p)),
        ],
        interpretation=f"The point Odds Ratio is {f(or_point)} with association p={format_p(woolf_p)}.",
        formula="Woolf: SE(ln OR) = √[1/a + 1/b + 1/c + 1/d]",
        warnings=warnings,
    )
