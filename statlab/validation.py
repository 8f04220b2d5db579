"""Input preconditions checked before any calculator logic runs."""

import logging
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

log = logging.getLogger(__name__)

MIN_CONFIDENCE = 80.0
MAX_CONFIDENCE = 99.9

# Keeps every product and sum of cells well inside float range
MAX_COUNT = 1e12


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


@dataclass(frozen=True)
class ValidationOutcome:
    ok: bool
    values: BaseModel | None = None
    errors: tuple[FieldError, ...] = ()

    @property
    def messages(self) -> list[str]:
        return [f"{e.field}: {e.message}" for e in self.errors]


def check_count(value: float) -> float:
    if value < 0:
        raise ValueError("Count cannot be negative")
    if value > MAX_COUNT:
        raise ValueError(f"Count cannot exceed {MAX_COUNT:g}")
    return value


def check_count_size(value: Any) -> Any:
    """Range-check raw numbers before float coercion can overflow on them."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        check_count(value)
    return value


def check_confidence(value: float) -> float:
    if not MIN_CONFIDENCE <= value <= MAX_CONFIDENCE:
        raise ValueError(
            f"Confidence level must be between {MIN_CONFIDENCE:g} and {MAX_CONFIDENCE:g}"
        )
    return value


def _field_errors(exc: ValidationError) -> tuple[FieldError, ...]:
    errors = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"]) or "__root__"
        message = err["msg"]
        # pydantic prefixes messages raised from validators
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        errors.append(FieldError(field=field, message=message))
    return tuple(errors)


def validate_input(model: type[BaseModel], payload: Any) -> ValidationOutcome:
    """Validate a raw payload against an input model. Never raises on bad input."""
    try:
        values = model.model_validate(payload)
    except ValidationError as exc:
        errors = _field_errors(exc)
        log.info("Rejected %s payload: %s", model.__name__, errors)
        return ValidationOutcome(ok=False, errors=errors)
    return ValidationOutcome(ok=True, values=values)
