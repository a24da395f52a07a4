"""Entry point for the Jukebox API server.

Host and port are read from the ``API_HOST`` and ``API_PORT``
environment variables (defaults ``0.0.0.0`` and ``8000``).  The
jukebox and settings documents are fetched on startup; see
``jukebox_api.app.core.config`` for the other supported variables.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from jukebox_api.app.core.config import settings
from jukebox_api.app.main import app


async def main() -> None:
    # log_config=None keeps uvicorn on the handlers set up by create_app.
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
        log_config=None,
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    asyncio.run(main())
