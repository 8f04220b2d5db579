"""Closed-form 2x2 table statistics shared by the calculators.

Every helper here is total over non-negative counts: zero denominators yield
``inf`` or ``0`` instead of raising, so callers only have to format the
result. Interval helpers work on the log scale (Woolf for odds ratios, Katz
for risk ratios).
"""

import math
from dataclasses import dataclass

import numpy as np

from statlab.distributions import LARGE_SAMPLE_DF, t_p_value, z_critical

INF = math.inf


@dataclass(frozen=True)
class RatioEstimate:
    value: float
    lower: float
    upper: float
    se_log: float


@dataclass(frozen=True)
class ChiSquareStatistic:
    statistic: float
    numerator: float
    n: float
    row_totals: tuple[float, float]
    col_totals: tuple[float, float]


def safe_divide(numerator: float, denominator: float) -> float:
    """Divide, mapping x/0 to inf for x > 0 and to 0 otherwise."""
    if denominator == 0:
        return INF if numerator > 0 else 0.0
    return numerator / denominator


def risk(events: float, total: float) -> float:
    """Proportion with the outcome; 0 for an empty group."""
    return safe_divide(events, total)


def risk_ratio(a: float, b: float, c: float, d: float) -> float:
    r1 = risk(a, a + b)
    r2 = risk(c, c + d)
    if r2 == 0:
        return INF if r1 > 0 else 1.0
    return r1 / r2


def odds_ratio(a: float, b: float, c: float, d: float) -> float:
    return safe_divide(a * d, b * c)


def woolf_se(a: float, b: float, c: float, d: float) -> float:
    """SE of ln(OR). Requires all cells > 0."""
    return math.sqrt(1 / a + 1 / b + 1 / c + 1 / d)


def katz_se(a: float, b: float, c: float, d: float) -> float:
    """SE of ln(RR). Requires a > 0 and c > 0."""
    return math.sqrt((1 / a - 1 / (a + b)) + (1 / c - 1 / (c + d)))


def log_interval(estimate: float, se_log: float, z: float) -> tuple[float, float]:
    """exp(ln(estimate) -/+ z*se).

    Degenerate estimates get uninformative bounds: (0, inf) for inf and
    (0, 0) for 0.
    """
    if estimate > 0 and math.isfinite(estimate):
        log_est = math.log(estimate)
        return math.exp(log_est - z * se_log), math.exp(log_est + z * se_log)
    return 0.0, (INF if estimate > 0 else 0.0)


def log_estimate_p_value(estimate: float, se_log: float) -> float:
    """Two-sided p-value for H0: estimate == 1, using a large-sample z test on the log scale."""
    if estimate <= 0 or not math.isfinite(estimate):
        return 1.0
    z_stat = abs(math.log(estimate)) / se_log
    return t_p_value(z_stat, LARGE_SAMPLE_DF).two_sided


def compute_rr(a: float, b: float, c: float, d: float, conf: float = 95) -> RatioEstimate:
    """Risk ratio with a Katz log-scale confidence interval."""
    value = risk_ratio(a, b, c, d)
    se = katz_se(a, b, c, d) if a > 0 and c > 0 else INF
    lower, upper = log_interval(value, se, z_critical(conf))
    return RatioEstimate(value=value, lower=lower, upper=upper, se_log=se)


def compute_or(a: float, b: float, c: float, d: float, conf: float = 95) -> RatioEstimate:
    """Odds ratio with a Woolf log-scale confidence interval."""
    value = odds_ratio(a, b, c, d)
    se = woolf_se(a, b, c, d) if min(a, b, c, d) > 0 else INF
    lower, upper = log_interval(value, se, z_critical(conf))
    return RatioEstimate(value=value, lower=lower, upper=upper, se_log=se)


def continuity_numerator(a: float, b: float, c: float, d: float, yates: bool) -> float:
    """|ad - bc|, reduced by n/2 and clamped at 0 when Yates' correction applies."""
    numerator = abs(a * d - b * c)
    if yates:
        n = a + b + c + d
        numerator = max(0.0, numerator - n / 2)
    return numerator


def chi_square_2x2(a: float, b: float, c: float, d: float, yates: bool = False) -> ChiSquareStatistic | None:
    """Pearson chi-square for a 2x2 table, or None if a row or column total is zero."""
    rows = (a + b, c + d)
    cols = (a + c, b + d)
    if 0 in rows or 0 in cols:
        return None
    n = a + b + c + d
    numerator = continuity_numerator(a, b, c, d, yates)
    statistic = (n * numerator**2) / (rows[0] * rows[1] * cols[0] * cols[1])
    return ChiSquareStatistic(
        statistic=statistic,
        numerator=numerator,
        n=n,
        row_totals=rows,
        col_totals=cols,
    )


def expected_counts(a: float, b: float, c: float, d: float) -> np.ndarray:
    """Expected cell counts under independence (row total * column total / n)."""
    table = np.array([[a, b], [c, d]], dtype=float)
    n = table.sum()
    if n == 0:
        return np.zeros((2, 2))
    return np.outer(table.sum(axis=1), table.sum(axis=0)) / n
