# src/tareas_api/auth/service.py

"""
Password hashing and bearer-token issuing/verification.

Passwords: bcrypt over a SHA-256 pre-hash, so inputs longer than bcrypt's
72-byte limit still count in full.
Tokens: stateless JWTs signed with one shared secret, claims
{userId, username, iat, exp}.
"""

from __future__ import annotations

import base64
import hashlib
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt

from ..config import ConfigError
from ..core.errors import ExpiredTokenError, InvalidTokenError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TokenClaims:
    user_id: int
    username: str
    issued_at: int
    expires_at: int


def _pw_prehash(password: str) -> bytes:
    # base64 keeps the digest free of NUL bytes and within 72 bytes (44 chars).
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


class AuthService:
    def __init__(
        self,
        secret: str | None,
        *,
        algorithm: str = "HS256",
        token_ttl_seconds: int = 3600,
        bcrypt_rounds: int = 10,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not secret:
            raise ConfigError("Token signing secret is not configured (set TAREAS_JWT_SECRET).")
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = int(token_ttl_seconds)
        self._rounds = int(bcrypt_rounds)
        self._clock = clock

    @classmethod
    def from_settings(cls, settings) -> AuthService:
        return cls(
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            token_ttl_seconds=settings.token_ttl_seconds,
            bcrypt_rounds=settings.bcrypt_rounds,
        )

    # ---- passwords ----

    def hash_password(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(_pw_prehash(password), salt).decode("utf-8")

    def verify_password(self, password: str | None, password_hash: str) -> bool:
        if not password or not password_hash:
            return False
        try:
            return bcrypt.checkpw(_pw_prehash(password), password_hash.encode("utf-8"))
        except ValueError:
            # Malformed stored hash ("Invalid salt").
            logger.warning("Stored password hash is malformed; rejecting login.")
            return False

    # ---- tokens ----

    def issue_token(self, user_id: int, username: str) -> str:
        iat = int(self._clock())
        claims = {
            "userId": int(user_id),
            "username": username,
            "iat": iat,
            "exp": iat + self._ttl,
        }
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def verify_token(self, token: str) -> TokenClaims:
        """
        Decode and check a token.

        Raises:
        - ExpiredTokenError if exp is in the past
        - InvalidTokenError on a bad signature, malformed token or missing claims
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except ExpiredSignatureError as e:
            raise ExpiredTokenError() from e
        except JWTError as e:
            raise InvalidTokenError() from e

        user_id = payload.get("userId")
        username = payload.get("username")
        exp = payload.get("exp")
        if (
            not isinstance(user_id, int)
            or isinstance(user_id, bool)
            or not isinstance(username, str)
            or not isinstance(exp, int)
        ):
            raise InvalidTokenError()

        return TokenClaims(
            user_id=user_id,
            username=username,
            issued_at=int(payload.get("iat") or 0),
            expires_at=exp,
        )
