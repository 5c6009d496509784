"""Request Body — reads calculation fields from a JSON or form-encoded body.

Invariants:
    - Bodies larger than Settings.max_body_bytes → PayloadTooLargeError (413)
    - Unparseable JSON → MalformedBodyError (400)
    - A body that is not an object (or has an unsupported media type) yields {},
      so the validator reports the missing fields
    - Only fields the client actually sent are returned

Design Decisions:
    - Plain dependency over a Pydantic body parameter: one route accepts both
      application/json and application/x-www-form-urlencoded
    - No Content-Type is treated as JSON, as FastAPI does for body parameters
"""

import json
from typing import Any

from fastapi import Request

from calculator_api.core.errors import MalformedBodyError, PayloadTooLargeError
from calculator_api.schemas.calculation import CalculationRequest

FORM_MEDIA_TYPE = "application/x-www-form-urlencoded"
JSON_MEDIA_TYPE = "application/json"


async def read_calculation_fields(request: Request) -> dict[str, Any]:
    """Fields present in the request body, keyed by name."""
    limit = request.app.state.settings.max_body_bytes
    declared = request.headers.get("content-length", "")
    if declared.isdigit() and int(declared) > limit:
        raise PayloadTooLargeError(limit)

    raw = await request.body()
    if len(raw) > limit:
        raise PayloadTooLargeError(limit)
    if not raw:
        return {}

    media_type = _media_type(request)
    if media_type == FORM_MEDIA_TYPE:
        data: Any = dict(await request.form())
    elif media_type is None or _is_json(media_type):
        try:
            data = json.loads(raw)
        except ValueError as exc:
            raise MalformedBodyError() from exc
    else:
        return {}

    if not isinstance(data, dict):
        return {}
    return CalculationRequest.model_validate(data).provided_fields()


def _media_type(request: Request) -> str | None:
    header = request.headers.get("content-type")
    if not header:
        return None
    return header.split(";", 1)[0].strip().lower()


def _is_json(media_type: str) -> bool:
    return media_type == JSON_MEDIA_TYPE or media_type.endswith("+json")
