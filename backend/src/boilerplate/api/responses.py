"""Response envelope and error-to-status mapping shared by every router.

Every response body is {data, message, error} with empty fields omitted.
Error handling: ValidationError -> 400, AuthenticationError -> 401,
ResourceMissingError -> 404, IntegrityError -> 409, any other store error -> 500.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Generic, Optional, TypeVar

from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError

from boilerplate.exceptions import (
    AuthenticationError,
    BoilerplateError,
    InvalidIDError,
    ResourceMissingError,
    ValidationError,
)

logger = logging.getLogger(__name__)

DataT = TypeVar("DataT")


class Envelope(BaseModel, Generic[DataT]):
    """Default HTTP response structure."""

    data: Optional[DataT] = None
    message: Optional[str] = None
    error: Optional[str] = None


def envelope_json(status_code: int, message: Optional[str] = None, error: Optional[str] = None) -> JSONResponse:
    """Build an envelope response by hand, dropping empty fields."""
    body: dict[str, Any] = {}
    if message:
        body["message"] = message
    if error:
        body["error"] = error
    return JSONResponse(status_code=status_code, content=body)


def status_for(exc: Exception) -> int:
    if isinstance(exc, ValidationError):
        return 400
    if isinstance(exc, AuthenticationError):
        return 401
    if isinstance(exc, ResourceMissingError):
        return 404
    if isinstance(exc, IntegrityError):
        return 409
    if isinstance(exc, BoilerplateError):
        return 400
    return 500


def error_response(exc: Exception) -> JSONResponse:
    """Map a service or store error to an envelope response."""
    status_code = status_for(exc)
    if isinstance(exc, BoilerplateError):
        return envelope_json(status_code, message=exc.message, error=str(exc))
    if status_code == 409:
        logger.warning("Constraint violation: %s", exc.__class__.__name__)
        return envelope_json(status_code, message="request conflicts with existing data", error="constraint violation")

    logger.error("Unhandled store error", exc_info=exc)
    return envelope_json(
        status_code,
        message="Something broke on our server",
        error="internal server error",
    )


def parse_id(raw: str) -> uuid.UUID:
    """Parse a path id. Malformed ids are client errors (400), not 422s."""
    try:
        return uuid.UUID(raw)
    except (TypeError, ValueError) as e:
        raise InvalidIDError(detail=f"{raw!r} is not a UUID") from e
