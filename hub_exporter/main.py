"""
Hub Exporter - FastAPI Application Entry Point.
"""
from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.gzip import GZipMiddleware
from prometheus_client import CollectorRegistry
from pydantic import ValidationError

from hub_exporter import __version__
from hub_exporter.api.routes import router
from hub_exporter.core.config import Settings, get_settings
from hub_exporter.snmp.client import HubClient
from hub_exporter.snmp.collection_service import HubCollector

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        force=True,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan management.

    Shutdown: close the hub HTTP client.
    """
    logger.info("Exporting metrics for hub %s", app.state.client.base_url)
    yield
    logger.info("Shutting down application...")
    app.state.client.close()


def create_app(
    settings: Settings | None = None,
    client: HubClient | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Each app owns its registry, collector and hub client; nothing is
    registered on the prometheus_client default registry.
    """
    settings = settings or get_settings()
    if client is None:
        client = HubClient(
            settings.hub_base_url,
            timeout=settings.fetch_timeout,
            status_path=settings.status_path,
        )

    registry = CollectorRegistry(auto_describe=False)
    collector = HubCollector(client, namespace=settings.metrics_namespace)
    registry.register(collector)

    app = FastAPI(
        title="Hub Exporter",
        description="Prometheus exporter for the Virgin Media Hub router status",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.client = client
    app.state.collector = collector
    app.state.registry = registry

    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.include_router(router)
    return app


def main() -> None:
    """Console entry point: load settings, then serve until stopped."""
    import uvicorn

    setup_logging()
    try:
        settings = get_settings()
    except ValidationError as e:
        logger.critical("Invalid configuration:\n%s", e)
        sys.exit(1)

    setup_logging(settings.log_level)
    app = create_app(settings)
    uvicorn.run(
        app,
        host=settings.listen_host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
