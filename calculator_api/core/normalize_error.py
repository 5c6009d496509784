"""Error Normalization — maps any fault to the uniform JSON error envelope.

Invariants:
    - Output shape is always {status, statusCode, message} (+ stack when asked)
    - statusCode defaults to 500 when the fault carries no usable code
    - message defaults to "Internal Server Error" when the fault carries none
    - stack only when include_stack=True; the caller decides, not the environment
    - Terminal: never raises, never forwards the fault

Design Decisions:
    - Duck-typed on status_code/message/detail: covers CalculatorError and
      Starlette HTTPException without importing the web layer into core/
"""

import traceback

DEFAULT_STATUS_CODE = 500
DEFAULT_MESSAGE = "Internal Server Error"


def normalize_error(
    fault: BaseException, include_stack: bool = False,
) -> tuple[int, dict]:
    """Return (http_status, envelope) for a fault."""
    status_code = fault_status_code(fault)
    envelope = {
        "status": "error",
        "statusCode": status_code,
        "message": fault_message(fault),
    }
    if include_stack:
        envelope["stack"] = format_stack(fault)
    return status_code, envelope


def fault_status_code(fault: BaseException) -> int:
    code = getattr(fault, "status_code", None)
    if isinstance(code, int) and not isinstance(code, bool) and 100 <= code <= 599:
        return code
    return DEFAULT_STATUS_CODE


def fault_message(fault: BaseException) -> str:
    for candidate in (
        getattr(fault, "message", None),
        getattr(fault, "detail", None),
        str(fault),
    ):
        if isinstance(candidate, str) and candidate:
            return candidate
    return DEFAULT_MESSAGE


def format_stack(fault: BaseException) -> str:
    """Formatted traceback; for never-raised faults this is just the header line."""
    return "".join(
        traceback.format_exception(type(fault), fault, fault.__traceback__),
    )
