"""FastAPI application factory / entrypoint for the items service.

Startup sequence (see `lifespan`):
1. configure logging,
2. resolve the document store URI from the platform's service binding
   descriptor, or the local default when no descriptor is present,
3. build the pymongo client and stash it on `app.state`.

A broken binding descriptor raises `common.bindings.ConfigError` during
step 2; it is logged and re-raised so the server never starts serving
against the wrong (or no) database.

Run locally with `items-api` or `uvicorn app.main:app`.
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncIterator, Mapping, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from common.bindings import ConfigError, redact_uri, resolve_endpoint
from common.logging import configure_logging

from .db import connect, items_collection
from .errors import install_error_handlers
from .routes import router
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)

SERVICE_NAME = "items"


def resolve_database_uri(settings: Settings, env: Mapping[str, str]) -> str:
    """Resolve the document store URI for this process.

    Args:
        settings: Service settings (service type, default URI, descriptor variable).
        env: Environment snapshot to read the descriptor from.

    Returns:
        str: Connection URI.

    Raises:
        ConfigError: If a descriptor is present but unusable.
    """
    try:
        uri = resolve_endpoint(
            env,
            settings.service_type,
            settings.default_uri,
            key=settings.bindings_env,
            binding_name=settings.binding_name,
        )
    except ConfigError as exc:
        logger.error("invalid service binding (%s): %s", exc.kind.value, exc)
        raise

    source = "binding" if settings.bindings_env in env else "default"
    logger.info("%s endpoint from %s: %s", settings.service_type, source, redact_uri(uri))
    return uri


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings: Settings = app.state.settings
    configure_logging(settings.log_level, SERVICE_NAME)

    uri = resolve_database_uri(settings, dict(os.environ))
    client = connect(uri, settings)
    try:
        app.state.database_uri = uri
        app.state.client = client
        app.state.collection = items_collection(client, settings)
        yield
    finally:
        client.close()
        logger.info("document store client closed")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the items FastAPI application.

    Args:
        settings: Override settings (tests). Defaults to `get_settings()`.

    Returns:
        FastAPI: Configured application; the database is wired on startup.
    """
    settings = settings or get_settings()

    app = FastAPI(title="Items API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    install_error_handlers(app)
    app.include_router(router)
    return app


app = create_app()


def run() -> None:
    """Serve the app with uvicorn on the configured host/port."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
