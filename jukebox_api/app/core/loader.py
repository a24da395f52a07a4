"""
Startup data loader.

The jukebox and settings documents are fetched once, when the
application starts, using the ``requests`` library.  Each document is
validated with the Pydantic schemas from ``schemas`` and converted to
the in‑memory ``models``.

Any failure (network error, HTTP error status, malformed JSON or a
document of the wrong shape) raises :class:`DataLoadError`.  There is
no retry and no fallback to an empty collection: a service that
cannot load its data should not start.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import requests
from pydantic import TypeAdapter, ValidationError

from jukebox_api.app.core.exceptions import DataLoadError
from jukebox_api.app.models import Jukebox, Setting
from jukebox_api.app.schemas.jukebox import JukeboxPayload
from jukebox_api.app.schemas.setting import SettingsDocument


logger = logging.getLogger(__name__)

_JUKEBOX_LIST = TypeAdapter(List[JukeboxPayload])


class SourceLoader:
    """Fetch and parse the startup documents.

    Args:
        timeout: Connect and read timeout in seconds for each request.
        session: Optional requests session.  If not supplied a session
            will be created automatically.
    """

    def __init__(self, *, timeout: float = 10, session: Optional[requests.Session] = None) -> None:
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch_json(self, url: str) -> Any:
        """GET ``url`` and return the decoded JSON body."""
        logger.info("Fetching %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            logger.error("Source %s answered with HTTP %s", url, status)
            raise DataLoadError(url, f"HTTP {status}") from exc
        except ValueError as exc:
            # Bad JSON; checked before RequestException, which requests'
            # JSONDecodeError also derives from.
            logger.error("Source %s did not return valid JSON: %s", url, exc)
            raise DataLoadError(url, "invalid JSON") from exc
        except requests.RequestException as exc:
            logger.error("Source %s could not be fetched: %s", url, exc)
            raise DataLoadError(url, str(exc)) from exc

    def load_jukeboxes(self, url: str) -> List[Jukebox]:
        data = self.fetch_json(url)
        try:
            payloads = _JUKEBOX_LIST.validate_python(data)
        except ValidationError as exc:
            logger.error("Jukebox source %s has an unexpected shape: %s", url, exc)
            raise DataLoadError(url, "unexpected jukebox document shape") from exc
        jukeboxes = [payload.to_model() for payload in payloads]
        logger.info("Loaded %d jukeboxes from %s", len(jukeboxes), url)
        return jukeboxes

    def load_settings(self, url: str) -> List[Setting]:
        data = self.fetch_json(url)
        try:
            document = SettingsDocument.model_validate(data)
        except ValidationError as exc:
            logger.error("Settings source %s has an unexpected shape: %s", url, exc)
            raise DataLoadError(url, "unexpected settings document shape") from exc
        settings = [payload.to_model() for payload in document.settings]
        logger.info("Loaded %d settings from %s", len(settings), url)
        return settings
