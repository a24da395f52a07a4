"""
Settings endpoints for API v1.

Settings are read‑only: they are loaded at startup together with the
jukeboxes.  Each setting lists the components a jukebox must carry,
with repeated names meaning a minimum count.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from jukebox_api.app.core.exceptions import InvalidFilterError, SettingNotFoundError
from jukebox_api.app.schemas.jukebox import JukeboxPayload
from jukebox_api.app.schemas.setting import SettingRead
from jukebox_api.app.services.catalog import Catalog, get_catalog


router = APIRouter()


@router.get("/", response_model=List[SettingRead])
async def list_settings(catalog: Catalog = Depends(get_catalog)) -> List[SettingRead]:
    """List all settings in source order."""
    return [SettingRead.from_model(setting) for setting in catalog.settings.all()]


@router.get("/{setting_id}", response_model=SettingRead)
async def get_setting(setting_id: str, catalog: Catalog = Depends(get_catalog)) -> SettingRead:
    """Retrieve a single setting by id."""
    setting = catalog.settings.get(setting_id)
    if setting is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Setting not found")
    return SettingRead.from_model(setting)


@router.get("/{setting_id}/jukeboxes", response_model=List[JukeboxPayload])
async def list_setting_jukeboxes(setting_id: str, catalog: Catalog = Depends(get_catalog)) -> List[JukeboxPayload]:
    """List the jukeboxes that satisfy a setting.

    Unlike the listing endpoint, an unknown setting id is reported as
    HTTP 404.  A known setting nobody satisfies, or one with no
    requirements at all, yields an empty list.
    """
    try:
        jukeboxes = catalog.jukeboxes.filter_by_setting(setting_id)
    except SettingNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except InvalidFilterError:
        jukeboxes = []
    return [JukeboxPayload.from_model(jukebox) for jukebox in jukeboxes]
