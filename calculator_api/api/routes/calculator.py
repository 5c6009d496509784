"""Calculator Route — thin shell around the validate → dispatch pipeline.

Invariants:
    - Every response is a CalculationResponse or (via the error handlers) an error envelope
    - Core returns Err values; this shell raises them for the terminal handler
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, status

from calculator_api.api.request_body import read_calculation_fields
from calculator_api.core.dispatch_operation import dispatch_operation
from calculator_api.core.validate_input import validate_calculation
from calculator_api.schemas.calculation import CalculationResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["calculator"])


@router.post(
    "/calculate", response_model=CalculationResponse,
    status_code=status.HTTP_200_OK,
)
async def calculate(fields: dict[str, Any] = Depends(read_calculation_fields)):
    """Validate the operands, then apply the requested operation."""
    outcome = validate_calculation(**fields)
    if outcome.is_ok:
        outcome = dispatch_operation(outcome.value)
    if not outcome.is_ok:
        raise outcome.error

    logger.debug(
        f"Calculated {outcome.value.operation.value}: {outcome.value.result}",
    )
    return CalculationResponse.from_outcome(outcome.value)
