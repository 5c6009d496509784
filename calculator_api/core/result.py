"""Result Type — explicit success/failure values returned by the pure core.

Invariants:
    - Core functions return Ok or Err, they never raise CalculatorError
    - Err always wraps a CalculatorError so the normalizer can map it

Design Decisions:
    - Frozen dataclasses over tuples: pattern-matchable and self-describing
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from calculator_api.core.errors import CalculatorError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    error: CalculatorError

    @property
    def is_ok(self) -> bool:
        return False


Result = Ok[T] | Err
