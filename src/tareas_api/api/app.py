# src/tareas_api/api/app.py

"""
FastAPI application factory.

The app never builds its own stores: it receives a ready AppState
(see cli/bootstrap.py), which keeps tests free to inject fakes.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from ..core.state import AppState
from . import auth_routes, task_routes
from .errors import install_error_handlers

logger = logging.getLogger(__name__)

BANNER = "Servidor básico con FastAPI funcionando 🚀"


def create_app(state: AppState) -> FastAPI:
    title = str(getattr(state.settings, "app_name", "tareas-api"))
    app = FastAPI(title=title)
    app.state.app_state = state

    install_error_handlers(app)

    @app.get("/", response_class=PlainTextResponse)
    def banner() -> str:
        return BANNER

    @app.get("/error-test")
    def error_test() -> None:
        # Diagnostic route: exercises the 500 path of the error responder.
        raise RuntimeError("Error de prueba intencional")

    app.include_router(auth_routes.router)
    app.include_router(task_routes.router)

    logger.debug("App %s created", title)
    return app
