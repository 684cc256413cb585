"""Built-in calculator routes.

Provides:
- GET /v1/calculators (List Calculators)
- GET /v1/calculators/{calculatorId} (Get Calculator)
- POST /v1/calculators/{calculatorId}/calculate (Run Calculator)
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from freecalc.api.error_model import ErrorResponse
from freecalc.calc.engine import CalcEngine
from freecalc.calc.registry import HandlerKind
from freecalc.models.calculator import (
    CalculateRequest,
    CalculateResponse,
    CalculatorDefinitionModel,
    CalculatorListResponse,
)

router = APIRouter(prefix="/v1", tags=["Calculators"])


def _get_engine(request: Request) -> CalcEngine:
    engine: CalcEngine = request.app.state.engine
    return engine


@router.get(
    "/calculators",
    response_model=CalculatorListResponse,
    operation_id="listCalculators",
)
def list_calculators(
    request: Request, handler_kind: HandlerKind | None = None
) -> CalculatorListResponse:
    """List registered calculators, optionally filtered by handler family."""
    definitions = _get_engine(request).registry.list_registered()
    if handler_kind is not None:
        definitions = [d for d in definitions if d.handler_kind == handler_kind]

    items = [CalculatorDefinitionModel.from_definition(d) for d in definitions]
    return CalculatorListResponse(items=items, total=len(items))


@router.get(
    "/calculators/{calculator_id}",
    response_model=CalculatorDefinitionModel,
    responses={404: {"model": ErrorResponse}},
    operation_id="getCalculator",
)
def get_calculator(calculator_id: str, request: Request) -> CalculatorDefinitionModel:
    """Get a calculator definition.

    Raises:
        HTTPException: 404 if no calculator is registered under the id.
    """
    definition = _get_engine(request).registry.get(calculator_id)
    if definition is None:
        raise HTTPException(status_code=404, detail="Calculator not found")
    return CalculatorDefinitionModel.from_definition(definition)


@router.post(
    "/calculators/{calculator_id}/calculate",
    response_model=CalculateResponse,
    operation_id="runCalculator",
)
def run_calculator(
    calculator_id: str, body: CalculateRequest, request: Request
) -> CalculateResponse:
    """Run a built-in calculator.

    Always 200: unknown ids get the fallback message and handler failures
    the fixed error string.
    """
    outcome = _get_engine(request).calculate(calculator_id, body.as_strings())
    return CalculateResponse(
        calculator_id=outcome.calculator_id,
        handler_kind=outcome.handler_kind,
        result=outcome.result,
    )
