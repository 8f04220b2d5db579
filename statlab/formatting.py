import math

from statlab.config import settings

INFINITY_SYMBOL = "∞"


def format_number(value: float, digits: int = 4) -> str:
    """Fixed-point text, or "∞" for anything non-finite."""
    if not math.isfinite(value):
        return INFINITY_SYMBOL
    return f"{value:.{digits}f}"


def format_p(p: float, digits: int = 4) -> str:
    threshold = settings.calculators.p_value_threshold
    if p < threshold:
        return f"< {threshold:g}"
    return f"{p:.{digits}f}"


def format_ci(lower: float, upper: float, digits: int = 4) -> str:
    return f"[{format_number(lower, digits)}, {format_number(upper, digits)}]"


def format_percent(proportion: float, digits: int = 2) -> str:
    if not math.isfinite(proportion):
        return INFINITY_SYMBOL
    return f"{proportion * 100:.{digits}f}%"


def format_conf(conf: float) -> str:
    """95.0 -> "95", 99.9 -> "99.9"."""
    return f"{conf:g}"


def format_count(count: float) -> str:
    """10.0 -> "10", 2.5 -> "2.5"."""
    if count.is_integer():
        return str(int(count))
    return repr(count)
