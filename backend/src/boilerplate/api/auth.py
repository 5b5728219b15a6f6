"""Bearer-token authentication.

Tokens are HS256 JWTs (python-jose). The user id lives in the claim named by
Settings.jwt_user_claim ("sub" by default) and becomes a Caller.

- require_caller: 401 unless a valid token is present (owner-scoped routes)
- optional_caller: a valid token -> Caller.user, no token -> Caller.internal,
  a bad token -> 401 (routes for resources without ownership)
"""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from boilerplate.config import Settings, get_settings
from boilerplate.crud.caller import Caller
from boilerplate.exceptions import AuthenticationError, InvalidIDError

bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(
    user_id: uuid.UUID,
    settings: Optional[Settings] = None,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Issue a signed access token for user_id (development and tests)."""
    settings = settings or get_settings()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=15))
    claims = {settings.jwt_user_claim: str(user_id), "exp": expire}
    return jwt.encode(
        claims,
        settings.jwt_secret.get_secret_value(),
        algorithm=settings.jwt_algorithm,
    )


def decode_caller(token: str, settings: Settings) -> Caller:
    """Verify a token and turn its user claim into a Caller.

    Raises AuthenticationError for bad signatures, expired tokens, and
    missing or malformed user claims.
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret.get_secret_value(),
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError as e:
        raise AuthenticationError(detail=str(e)) from e

    raw_user_id = payload.get(settings.jwt_user_claim)
    if not raw_user_id:
        raise AuthenticationError(detail=f"claim {settings.jwt_user_claim!r} is missing")
    try:
        return Caller.user(uuid.UUID(str(raw_user_id)))
    except (ValueError, InvalidIDError) as e:
        raise AuthenticationError(
            message="invalid user id",
            detail=f"claim {settings.jwt_user_claim!r} is not a valid UUID",
        ) from e


def _unauthorized(exc: AuthenticationError) -> HTTPException:
    return HTTPException(
        status_code=401,
        detail=exc.message,
        headers={"WWW-Authenticate": "Bearer"},
    )


def require_caller(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> Caller:
    """Authenticated caller or 401."""
    if credentials is None:
        raise _unauthorized(AuthenticationError(message="missing bearer token"))
    try:
        return decode_caller(credentials.credentials, settings)
    except AuthenticationError as e:
        raise _unauthorized(e) from e


def optional_caller(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> Caller:
    """Authenticated caller if a token is sent, otherwise the internal caller."""
    if credentials is None:
        return Caller.internal()
    try:
        return decode_caller(credentials.credentials, settings)
    except AuthenticationError as e:
        raise _unauthorized(e) from e
