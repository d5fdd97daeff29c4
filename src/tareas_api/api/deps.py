# src/tareas_api/api/deps.py

"""
Request-scoped dependencies: app state lookup and the session guard
that protects every /tareas route.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..core.errors import ForbiddenError, TokenError, UnauthorizedError
from ..core.state import AppState

logger = logging.getLogger(__name__)

# auto_error=False: a missing/empty header must become our own 401 body.
bearer = HTTPBearer(auto_error=False)


@dataclass(frozen=True, slots=True)
class Session:
    user_id: int
    username: str


def get_state(request: Request) -> AppState:
    return request.app.state.app_state


def require_session(
    request: Request,
    creds: HTTPAuthorizationCredentials | None = Depends(bearer),
    state: AppState = Depends(get_state),
) -> Session:
    """
    Resolve the caller from "Authorization: Bearer <token>".

    - no header / no token        -> 401 "Token no proporcionado"
    - bad signature, junk, expiry -> 403 "Token inválido o expirado"

    On success the session is also stored on request.state.session.
    """
    token = creds.credentials.strip() if creds and creds.credentials else ""
    if not token:
        raise UnauthorizedError("Token no proporcionado")

    try:
        claims = state.auth.verify_token(token)
    except TokenError as e:
        logger.debug("Rejected token on %s %s: %s", request.method, request.url.path, type(e).__name__)
        raise ForbiddenError("Token inválido o expirado") from e

    session = Session(user_id=claims.user_id, username=claims.username)
    request.state.session = session
    return session
