"""
FastAPI dependency functions for the request gate.

These are attached to routes with Depends() so that every request on the
route is checked by the app's RequestGate before the handler runs.
"""

import json
import logging
import math
from typing import Any

from fastapi import HTTPException, Request, status

from .request_gate import GateDenied

log = logging.getLogger("form_echo.gate")

JSON_MEDIA_TYPE = "application/json"

# same limit as the original service's JSON parser
MAX_BODY_BYTES = 100 * 1024


def _reject_constant(name: str):
    # NaN / Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def _parse_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range: {text}")
    return value


def _is_json(request: Request) -> bool:
    media_type = request.headers.get("content-type", "").split(";", 1)[0]
    return media_type.strip().lower() == JSON_MEDIA_TYPE


async def read_submission(request: Request) -> Any:
    """
    Decode the request body.

    Only `application/json` bodies are parsed; any other body is treated
    as an empty payload, which the gate then denies.

    Returns:
        Any: The decoded JSON object or array, or an empty dict when the
        body is missing or not JSON.

    Raises:
        HTTPException: 413 if the body is larger than MAX_BODY_BYTES.
        HTTPException: 400 if the body is not valid JSON, holds a number
            outside the float range, or its top-level value is not an
            object or array.
    """
    if not _is_json(request):
        return {}
    raw = await request.body()
    if not raw:
        return {}
    if len(raw) > MAX_BODY_BYTES:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail="Request body too large",
        )
    try:
        payload = json.loads(raw, parse_constant=_reject_constant, parse_float=_parse_float)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Malformed JSON body",
        )
    if not isinstance(payload, (dict, list)):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="JSON body must be an object or array",
        )
    return payload


async def enforce_gate(request: Request) -> Any:
    """
    Dependency that runs the app's RequestGate against the request.

    Read requests are let through without touching the body.

    Returns:
        Any: The unmodified payload for write requests, None for reads.

    Raises:
        GateDenied: If the gate denies the request. The payload is not logged.
    """
    gate = request.app.state.gate
    if gate.is_read(request.method):
        return None

    payload = await read_submission(request)
    try:
        gate.check(request.method, payload)
    except GateDenied:
        log.info("Denied %s %s", request.method, request.url.path)
        raise
    log.debug("Allowed %s %s with fields %s", request.method, request.url.path,
              sorted(payload) if isinstance(payload, dict) else [])
    return payload
