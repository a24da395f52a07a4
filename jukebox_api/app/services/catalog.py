"""
Catalog: the data loaded at startup.

The catalog bundles the jukebox service and the settings index.  It
is built once, stored on ``app.state`` and handed to request handlers
through :func:`get_catalog`; nothing mutates it afterwards.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

import requests
from fastapi import Request

from jukebox_api.app.core.config import Settings
from jukebox_api.app.core.loader import SourceLoader
from jukebox_api.app.models import Jukebox, Setting
from jukebox_api.app.services.jukebox_service import JukeboxService
from jukebox_api.app.services.settings_service import SettingsIndex


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Catalog:
    jukeboxes: JukeboxService
    settings: SettingsIndex

    @classmethod
    def build(cls, jukeboxes: Iterable[Jukebox], settings: Iterable[Setting]) -> "Catalog":
        index = SettingsIndex(settings)
        return cls(jukeboxes=JukeboxService(jukeboxes, index), settings=index)


def load_catalog(config: Settings, session: Optional[requests.Session] = None) -> Catalog:
    """Fetch both source documents and build the catalog.

    Raises :class:`DataLoadError` if either document cannot be loaded.
    """
    loader = SourceLoader(timeout=config.source_timeout, session=session)
    settings = loader.load_settings(config.settings_source_url)
    jukeboxes = loader.load_jukeboxes(config.jukebox_source_url)
    catalog = Catalog.build(jukeboxes, settings)
    logger.info("Catalog ready: %d jukeboxes, %d settings", len(catalog.jukeboxes), len(catalog.settings))
    return catalog


def get_catalog(request: Request) -> Catalog:
    """FastAPI dependency returning the catalog loaded at startup."""
    return request.app.state.catalog
