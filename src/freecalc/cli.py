"""freecalc CLI - deterministic command-line access to the calculation engine.

Usage:
    python -m freecalc calculate SLUG [--input KEY=VALUE ...]
    python -m freecalc execute --formula F [--input KEY=VALUE ...] [--label L] [--unit U]
    python -m freecalc registry list [--kind KIND]
    python -m freecalc registry show SLUG
    python -m freecalc validate [--input PATH]
    python -m freecalc serve [--host HOST] [--port PORT]

Output is JSON with sorted keys.

Exit codes:
    0: Success / validation passed
    1: Internal error
    2: Rejected input / validation failed / unknown calculator
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from freecalc.calc.engine import CalcEngine
from freecalc.calc.registry import CalculatorDefinition, HandlerKind
from freecalc.services.custom_calculator import (
    CustomCalculatorError,
    CustomCalculatorRequest,
    execute_custom_calculator,
)
from freecalc.validators import derive_slug, infer_category, validate_generated_calculator

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


class InputArgumentError(ValueError):
    """Raised for a --input value that is not KEY=VALUE."""


def _output_json(data: dict[str, Any]) -> None:
    """Output JSON to stdout with deterministic ordering."""
    print(json.dumps(data, sort_keys=True, indent=2))


def _make_error_result(code: str, message: str, **details: Any) -> dict[str, Any]:
    error: dict[str, Any] = {"code": code, "message": message}
    error.update({key: value for key, value in details.items() if value is not None})
    return {"error": error}


def _parse_inputs(pairs: list[str] | None) -> dict[str, str]:
    """Turn ["a=1", "b=2"] into {"a": "1", "b": "2"}; later keys win."""
    inputs: dict[str, str] = {}
    for pair in pairs or []:
        key, separator, value = pair.partition("=")
        if not separator or not key:
            raise InputArgumentError(f"Expected KEY=VALUE, got '{pair}'")
        inputs[key] = value
    return inputs


def _definition_to_dict(definition: CalculatorDefinition) -> dict[str, Any]:
    return {
        "handler_kind": str(definition.handler_kind),
        "required_fields": list(definition.required_fields),
        "slug": definition.slug,
        "unit_system": str(definition.unit_system),
    }


def _load_json_input(input_path: str | None) -> tuple[Any, str | None]:
    """Load JSON from file or stdin.

    Returns:
        Tuple of (parsed_data, error_message). If error_message is not None,
        parsed_data should be ignored.
    """
    try:
        if input_path:
            with open(input_path, encoding="utf-8") as f:
                content = f.read()
        else:
            content = sys.stdin.read()

        if not content.strip():
            return None, "Empty input"

        return json.loads(content), None
    except FileNotFoundError:
        return None, f"File not found: {input_path}"
    except json.JSONDecodeError as e:
        return None, f"Invalid JSON: {e}"
    except OSError as e:
        return None, f"Cannot read input: {e}"


def cmd_calculate(args: argparse.Namespace) -> int:
    """Run a built-in calculator. Unknown slugs get the fallback message (exit 0)."""
    try:
        inputs = _parse_inputs(args.input)
    except InputArgumentError as e:
        _output_json(_make_error_result("INVALID_INPUT", str(e)))
        return 2

    outcome = CalcEngine().calculate(args.slug, inputs)
    _output_json(
        {
            "calculator_id": outcome.calculator_id,
            "handler_kind": str(outcome.handler_kind),
            "result": outcome.result,
        }
    )
    return 0


def cmd_execute(args: argparse.Namespace) -> int:
    """Evaluate a formula in the sandbox.

    Exit codes:
        0: finite result
        2: rejected formula or input
    """
    try:
        inputs = _parse_inputs(args.input)
    except InputArgumentError as e:
        _output_json(_make_error_result("INVALID_INPUT", str(e)))
        return 2

    request = CustomCalculatorRequest(
        formula=args.formula,
        inputs=inputs,
        result_label=args.label,
        result_unit=args.unit,
    )
    try:
        result = execute_custom_calculator(request)
    except CustomCalculatorError as e:
        _output_json(
            _make_error_result(
                "FORMULA_REJECTED",
                str(e),
                reason_code=str(e.reason_code) if e.reason_code is not None else None,
                field=e.field,
            )
        )
        return 2

    _output_json(result.model_dump())
    return 0


def cmd_registry_list(args: argparse.Namespace) -> int:
    """List registered calculators."""
    definitions = CalcEngine().registry.list_registered()
    if args.kind is not None:
        definitions = [d for d in definitions if d.handler_kind == args.kind]

    _output_json(
        {
            "calculators": [_definition_to_dict(d) for d in definitions],
            "total": len(definitions),
        }
    )
    return 0


def cmd_registry_show(args: argparse.Namespace) -> int:
    """Show one calculator definition; exit 2 when unknown."""
    definition = CalcEngine().registry.get(args.slug)
    if definition is None:
        _output_json(_make_error_result("NOT_FOUND", f"Unknown calculator: '{args.slug}'"))
        return 2

    _output_json(_definition_to_dict(definition))
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate a generated calculator document.

    Exit codes:
        0: pass=True
        2: pass=False (validation failed or invalid input)
    """
    data, error_msg = _load_json_input(args.input)
    if error_msg is not None:
        _output_json(
            {
                "errors": [{"code": "INVALID_JSON", "message": error_msg, "path": "$"}],
                "pass": False,
                "warnings": [],
            }
        )
        return 2

    validation_result = validate_generated_calculator(data)
    result_dict = validation_result.to_dict()
    if validation_result.passed:
        result_dict["slug"] = derive_slug(data["name"])
        result_dict["category"] = str(infer_category(data["name"], data["description"]))

    _output_json(result_dict)
    return 0 if validation_result.passed else 2


def cmd_serve(args: argparse.Namespace) -> int:
    """Serve the HTTP API with uvicorn until interrupted."""
    import uvicorn

    from freecalc.api.main import create_app

    uvicorn.run(create_app(), host=args.host, port=args.port, log_level="info")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="freecalc",
        description="freecalc - calculation engine CLI",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    calculate_parser = subparsers.add_parser(
        "calculate",
        help="Run a built-in calculator",
    )
    calculate_parser.add_argument("slug", help="Calculator id, e.g. mortgage-calculator")
    calculate_parser.add_argument(
        "--input",
        action="append",
        metavar="KEY=VALUE",
        help="Field value (repeatable)",
    )

    execute_parser = subparsers.add_parser(
        "execute",
        help="Evaluate a formula in the sandbox",
    )
    execute_parser.add_argument("--formula", required=True, help="Formula, e.g. '(a + b) / 2'")
    execute_parser.add_argument(
        "--input",
        action="append",
        metavar="KEY=VALUE",
        help="Variable value (repeatable)",
    )
    execute_parser.add_argument("--label", default=None, help="Result label")
    execute_parser.add_argument("--unit", default=None, help="Result unit")

    registry_parser = subparsers.add_parser(
        "registry",
        help="Calculator registry operations",
    )
    registry_subparsers = registry_parser.add_subparsers(
        dest="registry_command",
        help="Registry subcommands",
    )
    list_parser = registry_subparsers.add_parser("list", help="List calculators")
    list_parser.add_argument(
        "--kind",
        type=HandlerKind,
        choices=list(HandlerKind),
        default=None,
        help="Only calculators of this handler family",
    )
    show_parser = registry_subparsers.add_parser("show", help="Show one calculator")
    show_parser.add_argument("slug", help="Calculator id")

    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a generated calculator document",
    )
    validate_parser.add_argument(
        "--input",
        required=False,
        default=None,
        metavar="PATH",
        help="Path to JSON file (reads from stdin if omitted)",
    )

    serve_parser = subparsers.add_parser("serve", help="Serve the HTTP API")
    serve_parser.add_argument(
        "--host",
        type=str,
        default=DEFAULT_HOST,
        help=f"Host to bind to (default: {DEFAULT_HOST})",
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        default=DEFAULT_PORT,
        help=f"Port to listen on (default: {DEFAULT_PORT})",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Exit codes:
        0: Success / validation passed
        1: Internal error (unexpected)
        2: Rejected / validation failed / not found
    """
    try:
        parser = create_parser()
        args = parser.parse_args(argv)

        if args.command is None:
            parser.print_help()
            return 0

        if args.command == "calculate":
            return cmd_calculate(args)

        if args.command == "execute":
            return cmd_execute(args)

        if args.command == "registry":
            registry_command = getattr(args, "registry_command", None)
            if registry_command == "list":
                return cmd_registry_list(args)
            if registry_command == "show":
                return cmd_registry_show(args)
            parser.parse_args(["registry", "--help"])
            return 0

        if args.command == "validate":
            return cmd_validate(args)

        if args.command == "serve":
            return cmd_serve(args)

        return 0

    except Exception as e:
        # Unexpected errors return exit code 1
        _output_json(_make_error_result("INTERNAL_ERROR", str(e)))
        return 1


if __name__ == "__main__":
    sys.exit(main())
