"""
Request/response surface around the expression engine.

A caller hands over ``{"expression": "..."}`` and gets back either
``{"result": "<decimal string>"}`` or ``{"error": "<kind>", ...}``. Nothing
here knows about transport; an HTTP or UI layer serializes these mappings
however it likes.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from scicalc.core.config import EngineConfig
from scicalc.core.errors import CalcError, ErrorKind
from scicalc.core.expression_lang import calculate, format_result

logger = logging.getLogger(__name__)


class CalculationRequest(BaseModel):
    """An expression to evaluate."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    expression: str = Field(description="Expression text, e.g. 'sqrt(16) + 2'")


class CalculationResult(BaseModel):
    """Successful evaluation."""

    model_config = ConfigDict(frozen=True)

    result: str = Field(description="Canonical decimal rendering of the value")


class CalculationFailure(BaseModel):
    """Failed evaluation, classified by kind."""

    model_config = ConfigDict(frozen=True)

    error: ErrorKind
    detail: str = ""
    position: int | None = Field(
        default=None, description="0-based offset into the expression, when known"
    )


CalculationResponse = CalculationResult | CalculationFailure


def calculate_request(
    request: CalculationRequest, config: EngineConfig | None = None
) -> CalculationResponse:
    """Evaluate a request and wrap the outcome.

    Evaluation errors become a ``CalculationFailure``; nothing else is caught.
    """
    config = config or EngineConfig()
    try:
        value = calculate(request.expression, config)
    except CalcError as e:
        logger.info(f"Evaluation of {request.expression!r} failed: {e.kind} ({e.message})")
        return CalculationFailure(error=e.kind, detail=e.message, position=e.pos)
    return CalculationResult(result=format_result(value, config.precision))


def handle_payload(
    payload: Mapping[str, Any], config: EngineConfig | None = None
) -> dict[str, Any]:
    """Validate a raw request mapping, evaluate it and return the response mapping.

    Args:
        payload: Mapping with a single ``expression`` string field.
        config: Engine configuration; defaults apply when omitted.

    Returns:
        ``{"result": ...}`` on success, ``{"error": ..., "detail": ..., "position": ...}``
        on failure (``"invalid_request"`` when the payload itself is malformed).
    """
    try:
        request = CalculationRequest.model_validate(payload)
    except ValidationError as e:
        logger.info(f"Rejected calculation request: {e.error_count()} validation error(s)")
        failure = CalculationFailure(
            error=ErrorKind.INVALID_REQUEST,
            detail="; ".join(err["msg"] for err in e.errors()),
        )
        return failure.model_dump(mode="json")

    return calculate_request(request, config).model_dump(mode="json")
