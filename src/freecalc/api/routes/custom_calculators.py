"""Generated-calculator routes.

Provides:
- POST /v1/custom-calculators/execute (Execute Custom Calculator)
- POST /v1/custom-calculators/validate (Validate Generated Calculator)
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Request

from freecalc.api.error_model import ErrorResponse
from freecalc.models.custom_calculator import ValidateCalculatorResponse
from freecalc.sandbox import FormulaSandbox
from freecalc.services.custom_calculator import (
    CustomCalculatorRequest,
    CustomCalculatorResult,
    execute_custom_calculator,
)
from freecalc.validators import derive_slug, infer_category, validate_generated_calculator

router = APIRouter(prefix="/v1/custom-calculators", tags=["Custom Calculators"])


def _get_sandbox(request: Request) -> FormulaSandbox:
    sandbox: FormulaSandbox = request.app.state.sandbox
    return sandbox


@router.post(
    "/execute",
    response_model=CustomCalculatorResult,
    responses={400: {"model": ErrorResponse}},
    operation_id="executeCustomCalculator",
)
def execute(body: CustomCalculatorRequest, request: Request) -> CustomCalculatorResult:
    """Evaluate a generated calculator's formula.

    Raises:
        CustomCalculatorError: Rendered by the API's error handlers as 400
            FORMULA_REJECTED on a sandbox rejection, 400 INVALID_REQUEST when
            the formula or inputs are missing.
    """
    return execute_custom_calculator(body, sandbox=_get_sandbox(request))


@router.post(
    "/validate",
    response_model=ValidateCalculatorResponse,
    response_model_by_alias=True,
    operation_id="validateGeneratedCalculator",
)
def validate(request: Request, document: Any = Body(...)) -> ValidateCalculatorResponse:
    """Validate a generated calculator document.

    Always 200; the verdict is in ``pass``. Passing documents also get the
    slug and category they would be stored under.
    """
    result = validate_generated_calculator(document, sandbox=_get_sandbox(request))
    if not result.passed:
        return ValidateCalculatorResponse.from_result(result)

    return ValidateCalculatorResponse.from_result(
        result,
        slug=derive_slug(document["name"]),
        category=infer_category(document["name"], document["description"]),
    )
