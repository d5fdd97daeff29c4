# src/tareas_api/cli/main.py

"""
Server entrypoint.

Initializes logging, builds AppState, then serves the API with uvicorn.
"""

from __future__ import annotations

import logging
import sys

import uvicorn

from ..api.app import create_app
from .bootstrap import create_initial_state
from ..config import ConfigError, get_settings
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
    except ConfigError as e:
        logger.error("%s", e)
        sys.exit(2)

    app = create_app(state)
    logger.info("Servidor corriendo en http://localhost:%s", settings.port)

    # log_config=None: keep the handlers installed by setup_logging.
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
    logger.info("Bye.")


if __name__ == "__main__":
    main()
