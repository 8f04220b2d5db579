from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from statlab.config import settings
from statlab.validation import check_confidence, check_count, check_count_size


class Category(str, Enum):
    HYPOTHESIS_TESTS = "Hypothesis Tests"
    EPIDEMIOLOGY = "Epidemiology"
    CONFIDENCE_INTERVALS = "Confidence Intervals"


class CalculatorMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    category: Category
    description: str
    keywords: tuple[str, ...] = ()


# ── Inputs ──


class TwoByTwoInput(BaseModel):
    """Counts of a 2x2 table: rows exposed/unexposed, columns outcome yes/no."""

    model_config = ConfigDict(frozen=True)

    # Fractional counts are allowed (weighted or pre-corrected tables)
    a: float = Field(allow_inf_nan=False, description="Exposed, with outcome")
    b: float = Field(allow_inf_nan=False, description="Exposed, without outcome")
    c: float = Field(allow_inf_nan=False, description="Unexposed, with outcome")
    d: float = Field(allow_inf_nan=False, description="Unexposed, without outcome")

    @field_validator("a", "b", "c", "d", mode="before")
    @classmethod
    def counts_not_oversized(cls, v):
        return check_count_size(v)

    @field_validator("a", "b", "c", "d")
    @classmethod
    def counts_in_range(cls, v: float) -> float:
        return check_count(v)


class ChiSquareInput(TwoByTwoInput):
    yates: bool = False


class IntervalInput(TwoByTwoInput):
    conf: float = Field(
        default_factory=lambda: settings.calculators.default_confidence,
        description="Confidence level in percent",
    )

    @field_validator("conf")
    @classmethod
    def confidence_in_range(cls, v: float) -> float:
        return check_confidence(v)


# ── Output ──


class ResultEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    label: str
    value: str | int | float
    is_main: bool = Field(False, alias="isMain")


class CalculationResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    calculator_id: str
    results: list[ResultEntry]
    interpretation: str
    r_code: str | None = Field(None, alias="rCode")
    formula: str | None = None
    warnings: list[str] = []  # data quality notes
