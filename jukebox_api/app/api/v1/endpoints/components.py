"""Component endpoints for API v1."""

from typing import List

from fastapi import APIRouter, Depends

from jukebox_api.app.schemas.jukebox import JukeboxPayload
from jukebox_api.app.services.catalog import Catalog, get_catalog


router = APIRouter()


@router.get("/{name}/jukeboxes", response_model=List[JukeboxPayload])
async def list_component_jukeboxes(name: str, catalog: Catalog = Depends(get_catalog)) -> List[JukeboxPayload]:
    """List the jukeboxes carrying a component.

    The component name is matched without regard to case.
    """
    return [JukeboxPayload.from_model(jukebox) for jukebox in catalog.jukeboxes.filter_by_component(name)]
