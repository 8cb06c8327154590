from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bookingboost.api.router import api_router
from bookingboost.core.config import get_cors_origins, get_settings
from bookingboost.core.errors import register_exception_handlers
from bookingboost.core.logging import configure_logging


logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title=settings.app_name)
    # Reports are read-only, so GET is the only method browsers need.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins(),
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.include_router(api_router, prefix=settings.api_prefix)
    register_exception_handlers(app)
    logger.info("%s ready (%s) under %s", settings.app_name, settings.environment, settings.api_prefix)
    return app


app = create_app()
