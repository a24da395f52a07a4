"""
Main entrypoint for the Jukebox API.

This module assembles the FastAPI application, sets up logging and
includes the routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Run it with uvicorn or another ASGI server, e.g.::

    uvicorn jukebox_api.app.main:app

The jukebox and settings documents are fetched in the startup hook.
If either cannot be loaded the hook raises and the server does not
start.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api import help as help_page
from .api.v1.endpoints.jukeboxes import legacy_router
from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .services.catalog import Catalog, load_catalog


logger = logging.getLogger(__name__)


def create_app(catalog: Optional[Catalog] = None, config: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    catalog : Optional[Catalog]
        Pre‑built catalog to serve.  When omitted, the catalog is
        loaded from the configured sources during startup.
    config : Optional[Settings]
        Settings to use instead of the module‑level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    config = config or settings
    # Initialise logging before anything else so that the startup
    # fetch is logged.
    setup_logging(config.log_level, config.log_file)

    app = FastAPI(title=config.project_name, version=config.api_version)
    app.state.catalog = catalog

    app.include_router(help_page.router)
    app.include_router(v1_router, prefix="/api/v1")
    # Unversioned listing kept for existing clients of ``GET /api``.
    app.include_router(legacy_router, prefix="/api", tags=["jukeboxes"])

    @app.on_event("startup")
    async def startup_event() -> None:
        if app.state.catalog is None:
            app.state.catalog = load_catalog(config)
        else:
            logger.info("Serving pre-built catalog, source fetch skipped")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
