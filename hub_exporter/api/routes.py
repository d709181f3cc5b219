"""
API routes.

- GET /metrics — one scrape cycle, Prometheus text format, always 200
- GET /health  — liveness, never contacts the hub
"""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from hub_exporter import __version__

router = APIRouter()


@router.get("/metrics")
def metrics(request: Request) -> Response:
    """
    Scrape endpoint.

    Runs in the threadpool: the collector blocks on the hub request.
    A failed cycle is still a 200 with ``up 0`` in the body.
    """
    registry = request.app.state.registry
    return Response(content=generate_latest(registry), media_type=CONTENT_TYPE_LATEST)


@router.get("/health")
async def health_check(request: Request) -> dict[str, Any]:
    """Health check endpoint."""
    collector = request.app.state.collector
    last_outcome = collector.last_outcome
    return {
        "status": "ok",
        "version": __version__,
        "last_scrape": last_outcome.value if last_outcome else None,
    }
