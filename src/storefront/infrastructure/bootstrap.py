"""Composition root: wires concrete implementations to the ports.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from fastapi import FastAPI

from storefront.infrastructure.config import Settings, load_settings
from storefront.infrastructure.http.api import create_app
from storefront.infrastructure.http.client import HttpStoreGateway
from storefront.infrastructure.notifications import TimedNotifier


def settings() -> Settings:
    return load_settings()


def api_app() -> FastAPI:
    return create_app()


def store_gateway(base_url: str | None = None) -> HttpStoreGateway:
    cfg = settings()
    return HttpStoreGateway(base_url or cfg.store_url, timeout=cfg.request_timeout)


def notifier() -> TimedNotifier:
    return TimedNotifier(clear_after=settings().notification_seconds)
