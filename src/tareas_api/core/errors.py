# src/tareas_api/core/errors.py

"""
Error taxonomy shared by stores, the auth service and HTTP handlers.

Every ApiError carries the HTTP status it maps to and a message that is
safe to show to clients. The error responder turns them into {"error": message}.
"""

from __future__ import annotations


class ApiError(Exception):
    status_code: int = 500
    default_message: str = "Error interno del servidor"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ApiError):
    status_code = 400
    default_message = "Petición inválida"


class NotFoundError(ApiError):
    status_code = 404
    default_message = "Recurso no encontrado"


class UnauthorizedError(ApiError):
    status_code = 401
    default_message = "Token no proporcionado"


class ForbiddenError(ApiError):
    status_code = 403
    default_message = "Token inválido o expirado"


class ConflictError(ApiError):
    # Duplicate usernames have always been answered with 400.
    status_code = 400
    default_message = "Conflicto"


class InternalError(ApiError):
    status_code = 500


class StorageError(InternalError):
    """A backing file exists but cannot be read or does not hold a JSON array."""


class TokenError(ForbiddenError):
    """Base for token verification failures."""


class InvalidTokenError(TokenError):
    default_message = "Token inválido"


class ExpiredTokenError(TokenError):
    default_message = "Token expirado"
