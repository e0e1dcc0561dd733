"""FastAPI application factory."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from inventory_service.infrastructure.bootstrap import Storage, open_storage
from inventory_service.infrastructure.config import Settings
from inventory_service.infrastructure.web.errors import install_error_handlers
from inventory_service.infrastructure.web.routes import router

logger = logging.getLogger(__name__)


def create_app(settings: Settings, storage: Storage | None = None) -> FastAPI:
    app = FastAPI(
        title="Inventory Service",
        description="Register, browse and search inventory items with photos",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.storage = storage or open_storage(settings)

    install_error_handlers(app)
    app.include_router(router, tags=["inventory"])

    logger.info("Serving items from %s", settings.cache_dir)
    return app
