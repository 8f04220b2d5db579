import logging
from typing import Any

from fastapi import Body, FastAPI, HTTPException
from fastapi.responses import JSONResponse

from statlab.calculators import (
    CALCULATORS,
    Calculator,
    find_calculators,
    get_calculator,
    list_calculators,
)
from statlab.config import settings
from statlab.models import CalculationResult, CalculatorMetadata, Category
from statlab.validation import validate_input

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger(__name__)

app = FastAPI(title="statlab", version="0.1.0")


def _require(calculator_id: str) -> Calculator:
    calc = get_calculator(calculator_id)
    if not calc:
        raise HTTPException(status_code=404, detail=f"Unknown calculator: {calculator_id}")
    return calc


@app.get("/api/health")
async def health():
    return {"status": "ok", "calculators": len(CALCULATORS)}


@app.get("/api/calculators", response_model=list[CalculatorMetadata])
async def api_list_calculators(category: Category | None = None, q: str | None = None):
    calcs = find_calculators(q) if q else list_calculators()
    if category is not None:
        calcs = [c for c in calcs if c.metadata.category == category]
    return [c.metadata for c in calcs]


@app.get("/api/calculators/{calculator_id}")
async def api_get_calculator(calculator_id: str):
    calc = _require(calculator_id)
    return {
        "metadata": calc.metadata,
        "examples": list(calc.examples),
        "input_schema": calc.input_model.model_json_schema(),
    }


@app.post("/api/calculators/{calculator_id}/compute", response_model=CalculationResult)
async def api_compute(calculator_id: str, payload: Any = Body(...)):
    calc = _require(calculator_id)
    outcome = validate_input(calc.input_model, payload)
    if not outcome.ok:
        return JSONResponse(
            status_code=422,
            content={"errors": [{"field": e.field, "message": e.message} for e in outcome.errors]},
        )

    log.info("Computing %s", calculator_id)
    return calc.evaluate(outcome.values)
