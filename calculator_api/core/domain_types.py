"""Domain Types — value objects passed between the calculator stages.

Invariants:
    - All valid operations encoded as an Enum — no raw string matching downstream
    - ValidatedOperands holds floats only; the raw operation token is kept as-is
      so the dispatcher decides whether it is supported

Design Decisions:
    - str Enum: serializes to JSON without custom encoders
    - Frozen dataclasses: stages never mutate what they receive
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Operation(str, Enum):
    """The four supported binary operations."""
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"


@dataclass(frozen=True)
class ValidatedOperands:
    """Output of the validator: two parsed floats plus the untouched token."""
    num1: float
    num2: float
    operation: Any


@dataclass(frozen=True)
class CalculationOutcome:
    """Output of the dispatcher."""
    operation: Operation
    num1: float
    num2: float
    result: float
