"""Calculation Schemas — Pydantic models for the calculate endpoint boundary.

Invariants:
    - CalculationRequest accepts any JSON value per field; validation is core's job
    - Fields the client did not send are omitted from provided_fields()
    - CalculationResponse renders non-finite floats as null

Design Decisions:
    - Any-typed request fields over float: Pydantic coercion would hide the
      missing/invalid distinction the validator reports
"""

import math
from typing import Any, Literal

from pydantic import BaseModel, field_serializer

from calculator_api.core.domain_types import CalculationOutcome


class CalculationRequest(BaseModel):
    """Raw calculation input — num1, num2, operation, all optional here."""
    num1: Any = None
    num2: Any = None
    operation: Any = None

    def provided_fields(self) -> dict[str, Any]:
        """Only the fields present in the request body."""
        return {name: getattr(self, name) for name in self.model_fields_set}


class CalculationResponse(BaseModel):
    """Successful calculation envelope."""
    status: Literal["success"] = "success"
    operation: str
    num1: float | None
    num2: float | None
    result: float | None

    @field_serializer("num1", "num2", "result")
    def finite_or_null(self, v: float | None) -> float | None:
        if v is None or not math.isfinite(v):
            return None
        return v

    @classmethod
    def from_outcome(cls, outcome: CalculationOutcome) -> "CalculationResponse":
        return cls(
            operation=outcome.operation.value,
            num1=outcome.num1,
            num2=outcome.num2,
            result=outcome.result,
        )
