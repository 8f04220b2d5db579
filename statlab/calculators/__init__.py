import importlib
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel

from statlab.config import settings
from statlab.models import CalculationResult, CalculatorMetadata, Category
from statlab.validation import validate_input

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Calculator:
    metadata: CalculatorMetadata
    input_model: type[BaseModel]
    compute: Callable[[Any], CalculationResult]
    r_code: Callable[[Any], str]
    examples: tuple[dict, ...] = ()

    @property
    def id(self) -> str:
        return self.metadata.id

    def evaluate(self, values: BaseModel) -> CalculationResult:
        """Compute on already-validated input, attaching the R snippet if enabled."""
        result = self.compute(values)
        if settings.calculators.include_r_code:
            result = result.model_copy(update={"r_code": self.r_code(values)})
        return result


_REGISTRY: dict[str, Calculator] = {}

# Read-only view, keyed by calculator id
CALCULATORS: Mapping[str, Calculator] = MappingProxyType(_REGISTRY)

# All calculator module names — imported at bottom to auto-register
_MODULES = [
    "statlab.calculators.chi_square",
    "statlab.calculators.epi_measures",
    "statlab.calculators.ratios",
    "statlab.calculators.epi_toolkit",
]


def register(
    metadata: CalculatorMetadata,
    input_model: type[BaseModel],
    r_code: Callable[[Any], str],
    examples: list[dict] | None = None,
):
    """Decorator to register a calculator's compute function."""

    def decorator(fn):
        if metadata.id in _REGISTRY:
            raise ValueError(f"Calculator already registered: {metadata.id}")
        _REGISTRY[metadata.id] = Calculator(
            metadata=metadata,
            input_model=input_model,
            compute=fn,
            r_code=r_code,
            examples=tuple(examples or ()),
        )
        return fn

    return decorator


def get_calculator(calculator_id: str) -> Calculator | None:
    return _REGISTRY.get(calculator_id)


def list_calculators(category: Category | None = None) -> list[Calculator]:
    calcs = sorted(_REGISTRY.values(), key=lambda c: c.id)
    if category is None:
        return calcs
    return [c for c in calcs if c.metadata.category == category]


def find_calculators(query: str) -> list[Calculator]:
    """Case-insensitive search over id, title, description and keywords."""
    q = query.strip().lower()
    if not q:
        return list_calculators()
    matches = []
    for calc in list_calculators():
        meta = calc.metadata
        haystack = [meta.id, meta.title, meta.description, *meta.keywords]
        if any(q in text.lower() for text in haystack):
            matches.append(calc)
    return matches


def run_calculator(calculator_id: str, payload: dict) -> CalculationResult:
    """Validate the payload and dispatch to the registered calculator."""
    calc = get_calculator(calculator_id)
    if not calc:
        raise ValueError(
            f"Unknown calculator: {calculator_id}. "
            f"Available: {', '.join(sorted(_REGISTRY))}"
        )
    outcome = validate_input(calc.input_model, payload)
    if not outcome.ok:
        raise ValueError(f"Invalid input for {calculator_id}: {'; '.join(outcome.messages)}")

    log.info("Running calculator: %s with params %s", calculator_id, payload)
    return calc.evaluate(outcome.values)


# Auto-import modules to trigger @register decorators
for _mod in _MODULES:
    importlib.import_module(_mod)
