"""Critical values and p-values for the normal, t and chi-square distributions."""

import logging
import math
from dataclasses import dataclass

from scipy import stats

log = logging.getLogger(__name__)

# Degrees of freedom used when a t lookup stands in for the normal distribution
LARGE_SAMPLE_DF = 1000


@dataclass(frozen=True)
class TPValue:
    two_sided: float
    less: float
    greater: float


def _check_df(degrees_of_freedom: float) -> None:
    if not degrees_of_freedom > 0:
        raise ValueError(f"Degrees of freedom must be positive, got {degrees_of_freedom}")


def chi_square_p_value(statistic: float, degrees_of_freedom: int) -> float:
    """Upper-tail probability of a chi-square statistic."""
    _check_df(degrees_of_freedom)
    if statistic < 0 or math.isnan(statistic):
        raise ValueError(f"Chi-square statistic must be non-negative, got {statistic}")
    return float(stats.chi2.sf(statistic, degrees_of_freedom))


def z_critical(confidence_percent: float) -> float:
    """Two-sided standard normal critical value, e.g. 95 -> 1.95996."""
    if not 0 < confidence_percent < 100:
        raise ValueError(f"Confidence must be between 0 and 100, got {confidence_percent}")
    alpha = 1 - confidence_percent / 100
    return float(stats.norm.ppf(1 - alpha / 2))


def t_p_value(statistic: float, degrees_of_freedom: float) -> TPValue:
    """p-values of a t statistic for the two-sided and both one-sided alternatives."""
    _check_df(degrees_of_freedom)
    if math.isnan(statistic):
        raise ValueError("t statistic is NaN")
    dist = stats.t(degrees_of_freedom)
    less = float(dist.cdf(statistic))
    greater = float(dist.sf(statistic))
    two_sided = min(1.0, 2 * float(dist.sf(abs(statistic))))
    return TPValue(two_sided=two_sided, less=less, greater=greater)
