# src/tareas_api/api/auth_routes.py

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..core.errors import ConflictError, NotFoundError, UnauthorizedError, ValidationError
from ..core.state import AppState
from ..storage.models import User, next_id
from .deps import get_state
from .schemas import CredentialsIn

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/register", status_code=201)
def register(payload: CredentialsIn | None = None, state: AppState = Depends(get_state)) -> JSONResponse:
    username = payload.username if payload else None
    password = payload.password if payload else None
    if not username or not password:
        raise ValidationError("Usuario y contraseña son requeridos")

    users = state.user_store.list_users()
    if any(u.username == username for u in users):
        raise ConflictError("Usuario ya registrado")

    user = User(
        id=next_id(users),
        username=username,
        password_hash=state.auth.hash_password(password),
    )
    users.append(user)
    state.user_store.save_users(users)

    logger.info("User registered id=%s username=%s", user.id, user.username)
    return JSONResponse(status_code=201, content={"mensaje": "Usuario registrado correctamente"})


@router.post("/login")
def login(payload: CredentialsIn | None = None, state: AppState = Depends(get_state)) -> dict:
    username = payload.username if payload else None
    password = payload.password if payload else None

    user = state.user_store.find_by_username(username) if username else None
    if user is None:
        raise NotFoundError("Usuario no encontrado")

    if not state.auth.verify_password(password, user.password_hash):
        logger.info("Failed login for username=%s", username)
        raise UnauthorizedError("Contraseña incorrecta")

    token = state.auth.issue_token(user.id, user.username)
    logger.info("Login ok user_id=%s", user.id)
    return {"mensaje": "Login exitoso", "token": token}
