"""Input Validation — presence and numeric checks for a calculation request.

Invariants:
    - validate_calculation is PURE: returns Ok/Err, never raises
    - Absent num1/num2 or blank operation (null, "", false, 0, NaN) → MissingFieldError
    - num1/num2 that do not parse as decimals → InvalidNumberError
    - Presence is checked before parsing

Design Decisions:
    - Decimal-prefix parsing ("12abc" → 12.0) so clients sending loosely
      formatted strings still get a result
    - Booleans are rejected even though bool is an int subclass
"""

import math
import re
from typing import Any

from calculator_api.core.domain_types import ValidatedOperands
from calculator_api.core.errors import InvalidNumberError, MissingFieldError
from calculator_api.core.result import Err, Ok, Result

# Sentinel for "field not sent at all" (distinct from an explicit null)
MISSING: Any = object()

_DECIMAL_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.ASCII,
)


def parse_decimal(value: Any) -> float:
    """Parse a loosely typed value as a float. Returns NaN when impossible."""
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, float):
        return value
    if not isinstance(value, str):
        return math.nan
    match = _DECIMAL_PREFIX.match(value.lstrip())
    if not match:
        return math.nan
    return float(match.group(0).replace("Infinity", "inf"))


def validate_calculation(
    num1: Any = MISSING, num2: Any = MISSING, operation: Any = MISSING,
) -> Result[ValidatedOperands]:
    """Check presence, then parse both operands."""
    if num1 is MISSING or num2 is MISSING or _is_blank(operation):
        return Err(MissingFieldError())

    a = parse_decimal(num1)
    if math.isnan(a):
        return Err(InvalidNumberError("num1"))
    b = parse_decimal(num2)
    if math.isnan(b):
        return Err(InvalidNumberError("num2"))

    return Ok(ValidatedOperands(num1=a, num2=b, operation=operation))


def _is_blank(operation: Any) -> bool:
    """Blank means absent, null, "", false, 0 or NaN. Containers are never blank."""
    if operation is MISSING or operation is None:
        return True
    if isinstance(operation, (str, int, float)):
        return not operation or operation != operation
    return False
