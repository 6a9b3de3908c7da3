"""CLI command for running the API server."""

from __future__ import annotations

import click
import structlog
import uvicorn

from storefront.infrastructure.bootstrap import api_app, settings

logger = structlog.get_logger(__name__)


@click.command("serve")
@click.option("--host", default=None, help="Interface to bind (defaults to HOST).")
@click.option("--port", default=None, type=int, help="Port to listen on (defaults to PORT, 3000).")
def serve(host: str | None, port: int | None) -> None:
    """Run the store API server."""
    cfg = settings()
    host = host or cfg.host
    port = port if port is not None else cfg.port

    logger.info(f"Server running on http://localhost:{port}")
    uvicorn.run(api_app(), host=host, port=port, log_config=None)
