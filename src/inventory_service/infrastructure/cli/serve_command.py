"""CLI command that runs the HTTP server."""

from __future__ import annotations

import logging

import click
import uvicorn

from inventory_service.infrastructure.cli.options import cache_option
from inventory_service.infrastructure.config import Settings
from inventory_service.infrastructure.logging import configure_logging
from inventory_service.infrastructure.web.app import create_app

logger = logging.getLogger(__name__)


@click.command("serve")
@click.option("-p", "--port", required=True, type=int, envvar="INVENTORY_PORT", help="Port to listen on.")
@click.option("-h", "--host", required=True, envvar="INVENTORY_HOST", help="Host to bind to.")
@cache_option
@click.option(
    "--log-level",
    envvar="INVENTORY_LOG_LEVEL",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity (default INFO).",
)
def serve(port: int, host: str, cache_dir: str, log_level: str | None) -> None:
    """Start the inventory HTTP service."""
    settings = Settings.from_env(cache_dir=cache_dir, host=host, port=port, log_level=log_level)
    configure_logging(settings.log_level)

    ensure_cache_dir(settings)
    logger.info(
        "Starting with port=%d host=%s cache=%s", settings.port, settings.host, settings.cache_dir
    )

    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


def ensure_cache_dir(settings: Settings) -> None:
    if settings.cache_dir.is_dir():
        logger.info("Cache directory %s already exists", settings.cache_dir)
        return
    try:
        settings.cache_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise click.ClickException(f"Could not create cache directory {settings.cache_dir}: {exc}")
    logger.info("Created cache directory %s", settings.cache_dir)
