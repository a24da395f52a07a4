"""
Jukebox endpoints for API v1.

The listing endpoint accepts any combination of ``id`` and ``model``
(each repeatable or comma separated) and ``settingid`` filters plus
``offset`` and ``limit``, and answers with a plain‑text JSON listing.
A query that matches nothing, including one naming an unknown
setting, still returns HTTP 200 with an empty listing.

The same listing handler is also exposed without a version prefix at
``/api`` through ``legacy_router``.
"""

from typing import List, Optional, Tuple

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import PlainTextResponse

from jukebox_api.app.schemas.jukebox import JukeboxPayload
from jukebox_api.app.services.catalog import Catalog, get_catalog
from jukebox_api.app.services.query_service import JukeboxQuery, QueryService


router = APIRouter()
legacy_router = APIRouter()


def split_values(values: Optional[List[str]]) -> Tuple[str, ...]:
    """Flatten repeated and comma-separated parameter values.

    ``?model=a,b`` and ``?model=a&model=b`` both give ``("a", "b")``;
    empty parts are dropped.
    """
    return tuple(part for value in values or () for part in value.split(",") if part)


async def list_jukeboxes(
    ids: Optional[List[str]] = Query(None, alias="id", description="Jukebox id; repeat or separate with commas to request several"),
    models: Optional[List[str]] = Query(None, alias="model", description="Model name; repeat or separate with commas to request several"),
    settingid: Optional[str] = Query(None, description="Only jukeboxes satisfying this setting"),
    offset: int = Query(0, ge=0, description="Number of matching jukeboxes to skip"),
    limit: Optional[int] = Query(None, ge=1, description="Maximum number of jukeboxes to return"),
    catalog: Catalog = Depends(get_catalog),
) -> PlainTextResponse:
    """List jukeboxes matching every given filter.

    - **id**: keep jukeboxes with one of these ids (repeated or comma separated).
    - **model**: keep jukeboxes of one of these models (repeated or comma separated).
    - **settingid**: keep jukeboxes whose components satisfy the setting.
    - **offset**, **limit**: pagination over the matching jukeboxes.
    """
    query = JukeboxQuery(
        ids=split_values(ids),
        models=split_values(models),
        setting_id=settingid,
        offset=offset,
        limit=limit,
    )
    return PlainTextResponse(QueryService(catalog.jukeboxes).render(query))


router.add_api_route("/", list_jukeboxes, methods=["GET"], response_class=PlainTextResponse)
legacy_router.add_api_route("", list_jukeboxes, methods=["GET"], response_class=PlainTextResponse)


@router.get("/{jukebox_id}", response_model=JukeboxPayload)
async def get_jukebox(jukebox_id: str, catalog: Catalog = Depends(get_catalog)) -> JukeboxPayload:
    """Retrieve a single jukebox by its id.

    Raises 404 if no jukebox has this id.
    """
    jukebox = catalog.jukeboxes.filter_by_id(jukebox_id)
    if jukebox is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Jukebox not found")
    return JukeboxPayload.from_model(jukebox)
