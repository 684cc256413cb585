"""API models for built-in calculators."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from freecalc.calc.registry import CalculatorDefinition, HandlerKind, UnitSystem


class CalculatorDefinitionModel(BaseModel):
    """Public view of a registered calculator."""

    slug: str = Field(..., description="Stable calculator identifier")
    handler_kind: HandlerKind = Field(..., description="Handler family computing the result")
    required_fields: list[str] = Field(
        default_factory=list, description="Field ids, in presentation order"
    )
    unit_system: UnitSystem = Field(default=UnitSystem.NEUTRAL)

    model_config = {"frozen": True}

    @classmethod
    def from_definition(cls, definition: CalculatorDefinition) -> CalculatorDefinitionModel:
        return cls(
            slug=definition.slug,
            handler_kind=definition.handler_kind,
            required_fields=list(definition.required_fields),
            unit_system=definition.unit_system,
        )


class CalculatorListResponse(BaseModel):
    """All registered calculators."""

    items: list[CalculatorDefinitionModel]
    total: int


class CalculateRequest(BaseModel):
    """Raw field values for a built-in calculator.

    Values are passed to the handler as strings; JSON numbers are rendered
    with ``str`` and nulls are dropped.
    """

    inputs: dict[str, str | int | float | None] = Field(default_factory=dict)

    model_config = {"extra": "forbid"}

    @field_validator("inputs")
    @classmethod
    def _drop_nulls(
        cls, value: dict[str, str | int | float | None]
    ) -> dict[str, str | int | float | None]:
        return {key: raw for key, raw in value.items() if raw is not None}

    def as_strings(self) -> dict[str, str]:
        """Inputs in the form handlers consume."""
        return {key: raw if isinstance(raw, str) else str(raw) for key, raw in self.inputs.items()}


class CalculateResponse(BaseModel):
    """Result of a built-in calculator."""

    calculator_id: str
    handler_kind: HandlerKind
    result: str
