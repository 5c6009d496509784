"""Operation Dispatch — tests for the four operations and their failure modes.

Tests cover:
    - add/subtract/multiply/divide match plain float arithmetic
    - divide by 0 and -0 → DivideByZeroError
    - unknown, differently cased and non-string tokens → InvalidOperationError
"""

import pytest

from calculator_api.core.dispatch_operation import (
    OPERATIONS, dispatch_operation, resolve_operation,
)
from calculator_api.core.domain_types import Operation, ValidatedOperands
from calculator_api.core.errors import DivideByZeroError, InvalidOperationError
from calculator_api.core.result import Err, Ok


def _dispatch(a, b, op):
    return dispatch_operation(ValidatedOperands(num1=a, num2=b, operation=op))


@pytest.mark.parametrize("a, b, op, expected", [
    (5.0, 3.0, "add", 8.0),
    (10.0, 4.0, "subtract", 6.0),
    (6.0, 7.0, "multiply", 42.0),
    (20.0, 4.0, "divide", 5.0),
    (5.5, 2.5, "add", 8.0),
    (-5.0, 3.0, "add", -2.0),
])
def test_concrete_scenarios(a, b, op, expected):
    result = _dispatch(a, b, op)
    assert isinstance(result, Ok)
    assert result.value.result == expected


@pytest.mark.parametrize("a, b", [(0.1, 0.2), (1e308, 10.0), (-3.25, 7.125), (1 / 3, 3.0)])
def test_results_are_plain_ieee_arithmetic(a, b):
    assert _dispatch(a, b, "add").value.result == a + b
    assert _dispatch(a, b, "subtract").value.result == a - b
    assert _dispatch(a, b, "multiply").value.result == a * b
    assert _dispatch(a, b, "divide").value.result == a / b


def test_outcome_echoes_operation_and_operands():
    outcome = _dispatch(1.5, 2.0, "multiply").value
    assert outcome.operation is Operation.MULTIPLY
    assert outcome.num1 == 1.5
    assert outcome.num2 == 2.0


@pytest.mark.parametrize("divisor", [0.0, -0.0])
def test_divide_by_zero(divisor):
    result = _dispatch(10.0, divisor, "divide")
    assert isinstance(result, Err)
    assert isinstance(result.error, DivideByZeroError)
    assert result.error.status_code == 400
    assert result.error.message == "Cannot divide by zero"


def test_zero_divisor_only_matters_for_divide():
    assert _dispatch(10.0, 0.0, "multiply").value.result == 0.0


@pytest.mark.parametrize("token", ["power", "ADD", " add", "mod", 5, ["add"]])
def test_invalid_operation(token):
    result = _dispatch(5.0, 3.0, token)
    assert isinstance(result.error, InvalidOperationError)
    assert result.error.status_code == 400
    assert "Invalid operation" in result.error.message
    assert result.error.operation == token


def test_every_operation_has_a_function():
    assert set(OPERATIONS) == set(Operation)


def test_resolve_operation():
    assert resolve_operation("divide") is Operation.DIVIDE
    assert resolve_operation("nope") is None
    assert resolve_operation(None) is None
