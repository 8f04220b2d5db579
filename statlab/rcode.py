"""R reference snippets shown next to each result so users can reproduce it.

The strings are display-only and never executed. R's ``matrix`` fills
column-major, so the cells are listed as ``c(a, c, b, d)``.
"""

from statlab.formatting import format_conf, format_count
from statlab.models import ChiSquareInput, IntervalInput, TwoByTwoInput


def _matrix(t: TwoByTwoInput) -> str:
    cells = ", ".join(format_count(x) for x in (t.a, t.c, t.b, t.d))
    return f"tab <- matrix(c({cells}), nrow = 2)"


def _conf_level(conf: float) -> str:
    return f"{conf / 100:g}"


def chi_square_r_code(t: ChiSquareInput) -> str:
    return "\n".join([
        "# Create matrix table",
        _matrix(t),
        'colnames(tab) <- c("Exposure+", "Exposure-")',
        'rownames(tab) <- c("Outcome+", "Outcome-")',
        "",
        "# Chi-Square Test",
        f"chisq.test(tab, correct = {'TRUE' if t.yates else 'FALSE'})",
        "",
        "# Fisher's Exact Test (Recommended for small cells)",
        "fisher.test(tab)",
    ])


def epi_measures_r_code(t: TwoByTwoInput) -> str:
    return "\n".join([
        "# Create 2x2 table matrix",
        _matrix(t),
        'dimnames(tab) <- list(Disease = c("Yes", "No"), Exposure = c("Yes", "No"))',
        "",
        "# Association Tests",
        "chisq.test(tab)",
        "fisher.test(tab)",
        "",
        "# For Relative Risk and Odds Ratio (Requires 'epiR' package)",
        '# install.packages("epiR")',
        "library(epiR)",
        'epi.2by2(tab, method = "cohort.count")',
    ])


def risk_ratio_r_code(t: IntervalInput) -> str:
    return "\n".join([
        "# Create 2x2 matrix",
        _matrix(t),
        "",
        '# install.packages("epiR")',
        "library(epiR)",
        f'epi.2by2(tab, method = "cohort.count", conf.level = {_conf_level(t.conf)})',
    ])


def odds_ratio_r_code(t: IntervalInput) -> str:
    return "\n".join([
        "# Odds Ratio via Fisher Test",
        _matrix(t),
        f"fisher.test(tab, conf.level = {_conf_level(t.conf)})",
        "",
        "# Woolf method via 'epiR'",
        '# library(epiR); epi.2by2(tab, method = "case-control")',
    ])


def epi_toolkit_r_code(t: IntervalInput) -> str:
    return "\n".join([
        f"# Comprehensive 2x2 Analysis ({format_conf(t.conf)}% confidence)",
        _matrix(t),
        "",
        "# Fisher and Chi-Sq",
        f"fisher.test(tab, conf.level = {_conf_level(t.conf)})",
        "chisq.test(tab)",
        "",
        "# epiR for OR/RR/RD",
        "# library(epiR)",
        f'# epi.2by2(tab, method = "cohort.count", conf.level = {_conf_level(t.conf)})',
    ])
