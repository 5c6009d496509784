"""Operation Dispatch — maps an operation token to its binary arithmetic function.

Invariants:
    - dispatch_operation is PURE: returns Ok/Err, never raises
    - divide with a zero divisor (0.0 or -0.0) → DivideByZeroError
    - Unknown or non-string tokens → InvalidOperationError
    - Plain IEEE-754 double arithmetic, no rounding

Design Decisions:
    - Lookup table over if/elif: adding an operation is one entry
"""

import operator
from typing import Callable

from calculator_api.core.domain_types import (
    CalculationOutcome, Operation, ValidatedOperands,
)
from calculator_api.core.errors import DivideByZeroError, InvalidOperationError
from calculator_api.core.result import Err, Ok, Result

OPERATIONS: dict[Operation, Callable[[float, float], float]] = {
    Operation.ADD: operator.add,
    Operation.SUBTRACT: operator.sub,
    Operation.MULTIPLY: operator.mul,
    Operation.DIVIDE: operator.truediv,
}


def resolve_operation(token: object) -> Operation | None:
    """Return the Operation named by token, or None if unsupported."""
    if not isinstance(token, str):
        return None
    try:
        return Operation(token)
    except ValueError:
        return None


def dispatch_operation(operands: ValidatedOperands) -> Result[CalculationOutcome]:
    """Apply the requested operation to the validated operands."""
    op = resolve_operation(operands.operation)
    if op is None:
        return Err(InvalidOperationError(operands.operation))

    if op is Operation.DIVIDE and operands.num2 == 0:
        return Err(DivideByZeroError())

    return Ok(CalculationOutcome(
        operation=op,
        num1=operands.num1,
        num2=operands.num2,
        result=OPERATIONS[op](operands.num1, operands.num2),
    ))
