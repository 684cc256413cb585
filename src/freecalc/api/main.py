"""freecalc FastAPI application factory."""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from freecalc import __version__
from freecalc.api.errors import (
    FreecalcHttpError,
    custom_calculator_error_handler,
    freecalc_http_error_handler,
    generic_exception_handler,
    http_exception_handler,
    request_validation_error_handler,
)
from freecalc.api.middleware.request_id import RequestIdMiddleware
from freecalc.api.routes.calculators import router as calculators_router
from freecalc.api.routes.custom_calculators import router as custom_calculators_router
from freecalc.api.routes.health import router as health_router
from freecalc.calc.engine import CalcEngine
from freecalc.calc.registry import CalculatorRegistry
from freecalc.config import SandboxConfig
from freecalc.sandbox import FormulaSandbox
from freecalc.services.custom_calculator import CustomCalculatorError


def create_app(
    registry: CalculatorRegistry | None = None,
    sandbox_config: SandboxConfig | None = None,
) -> FastAPI:
    """Create and configure the freecalc FastAPI application.

    Args:
        registry: Optional registry for testing. If None, uses the shared
            registry seeded with the built-in catalogue.
        sandbox_config: Optional sandbox limits. If None, reads them from
            the environment (raises ConfigError if invalid).

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title="freecalc API",
        description="Calculation engine for built-in and generated calculators",
        version=__version__,
    )

    app.state.engine = CalcEngine(registry)
    app.state.sandbox = FormulaSandbox(sandbox_config)

    app.add_middleware(RequestIdMiddleware)

    app.add_exception_handler(CustomCalculatorError, custom_calculator_error_handler)
    app.add_exception_handler(FreecalcHttpError, freecalc_http_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.include_router(health_router)
    app.include_router(calculators_router)
    app.include_router(custom_calculators_router)

    return app
