# -*- coding: utf-8 -*-
"""Process entry point: build settings once, configure logging, serve the app."""

from __future__ import annotations

import logging

from .api import create_app
from .config import Settings


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


settings = Settings.from_env()
configure_logging(settings)
app = create_app(settings)


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port, reload=False)
