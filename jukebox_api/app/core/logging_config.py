"""
Logging configuration for the jukebox service.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger and routes uvicorn's own loggers through
it, so the startup catalog fetch, request handling and uvicorn's
access log all end up in the same place with the same format.  Run
uvicorn with ``log_config=None`` (as ``run.py`` does) so it does not
install handlers of its own afterwards.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers created by uvicorn; ``uvicorn.access`` carries one line per request.
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def route_server_loggers() -> None:
    """Make uvicorn's loggers propagate to the root handlers only."""
    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        for handler in server_logger.handlers[:]:
            server_logger.removeHandler(handler)
        server_logger.propagate = True


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure root logging for the service.

    Handlers are attached only if the root logger has none yet, so
    calling this again (e.g. from tests that build several apps) does
    not duplicate output.  uvicorn's loggers are routed to the root
    logger on every call.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a log file shared by the service and uvicorn.  If
        omitted, logs go to the console only.
    """
    route_server_loggers()

    root = logging.getLogger()
    if root.handlers:
        return

    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
