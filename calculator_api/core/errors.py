"""Error Hierarchy — typed, categorized faults for every calculator failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), status_code (int)
    - Calculator errors are client errors (400, 413) with a fixed message
    - The wire envelope is built only by normalize_error(); errors carry data,
      log_context() exposes it for structured logging

Design Decisions:
    - Single hierarchy with CalculatorError base: one normalizer maps all of them
    - Errors are returned as Err values from core/, raised only by the HTTP shell
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for logging and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    INTERNAL = "internal"


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        status_code: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.status_code = status_code

    def log_context(self) -> dict:
        """Structured fields for the error log line."""
        return {"error_code": self.code, "category": self.category.value}


# ─── Client Errors (400-level) ──────────────────────────────────

class MissingFieldError(CalculatorError):
    """num1, num2 or operation was not supplied."""
    def __init__(self):
        super().__init__(
            "Please provide num1, num2, and operation",
            "MISSING_FIELD", ErrorCategory.VALIDATION, 400,
        )


class InvalidNumberError(CalculatorError):
    """num1 or num2 does not parse as a decimal number."""
    def __init__(self, field: str | None = None):
        super().__init__(
            "num1 and num2 must be valid numbers",
            "INVALID_NUMBER", ErrorCategory.VALIDATION, 400,
        )
        self.field = field

    def log_context(self) -> dict:
        return {**super().log_context(), "field": self.field}


class InvalidOperationError(CalculatorError):
    """Operation token is not one of the supported operations."""
    def __init__(self, operation: object = None):
        super().__init__(
            "Invalid operation. Use: add, subtract, multiply, or divide",
            "INVALID_OPERATION", ErrorCategory.VALIDATION, 400,
        )
        self.operation = operation

    def log_context(self) -> dict:
        return {**super().log_context(), "operation": repr(self.operation)}


class MalformedBodyError(CalculatorError):
    """Request body is not parseable JSON."""
    def __init__(self):
        super().__init__(
            "Request body must be valid JSON",
            "MALFORMED_BODY", ErrorCategory.VALIDATION, 400,
        )


class PayloadTooLargeError(CalculatorError):
    """Request body exceeds the configured size limit."""
    def __init__(self, limit: int):
        super().__init__(
            "request entity too large",
            "PAYLOAD_TOO_LARGE", ErrorCategory.VALIDATION, 413,
        )
        self.limit = limit

    def log_context(self) -> dict:
        return {**super().log_context(), "limit": self.limit}


class DivideByZeroError(CalculatorError):
    """Division with a zero divisor."""
    def __init__(self):
        super().__init__(
            "Cannot divide by zero",
            "DIVIDE_BY_ZERO", ErrorCategory.BUSINESS_RULE, 400,
        )
