"""
Query dispatcher for the jukebox listing endpoint.

A :class:`JukeboxQuery` carries the optional filter dimensions (ids,
models, setting) and the pagination window.  :class:`QueryService`
filters each requested dimension independently, intersects the
results, pages over the matching records and renders the page as
text.

Pagination counts records, not rendered lines, so a page never ends
in the middle of a record.
"""

import json
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from jukebox_api.app.core.exceptions import InvalidFilterError
from jukebox_api.app.models import Jukebox
from jukebox_api.app.schemas.jukebox import JukeboxPayload
from jukebox_api.app.services.jukebox_service import JukeboxService


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JukeboxQuery:
    """Filters and pagination requested by a client.

    An empty ``ids`` or ``models`` tuple and a ``None`` setting mean the
    dimension was not requested.  ``limit=None`` means no upper bound.
    """

    ids: Tuple[str, ...] = ()
    models: Tuple[str, ...] = ()
    setting_id: Optional[str] = None
    offset: int = 0
    limit: Optional[int] = None

    def dimensions(self) -> List[str]:
        requested = []
        if self.ids:
            requested.append("id")
        if self.models:
            requested.append("model")
        if self.setting_id is not None:
            requested.append("settingid")
        return requested


def paginate(items: Sequence[Jukebox], offset: int = 0, limit: Optional[int] = None) -> List[Jukebox]:
    """Skip ``offset`` records, then keep at most ``limit`` of the rest."""
    if offset < 0:
        raise ValueError("offset must not be negative")
    if limit is not None and limit < 0:
        raise ValueError("limit must not be negative")
    end = None if limit is None else offset + limit
    return list(items[offset:end])


def render_jukeboxes(jukeboxes: Sequence[Jukebox]) -> str:
    """Render jukeboxes in the shape of the source document.

    The output is a JSON array indented by two spaces, one object per
    jukebox with its components as ``{"name": ...}`` objects.  An empty
    sequence renders as ``[]``.
    """
    payload = [JukeboxPayload.from_model(jukebox).model_dump() for jukebox in jukeboxes]
    return json.dumps(payload, indent=2, ensure_ascii=False)


class QueryService:
    """Answer listing queries over a :class:`JukeboxService`."""

    def __init__(self, jukeboxes: JukeboxService) -> None:
        self.jukeboxes = jukeboxes

    def select(self, query: JukeboxQuery) -> List[Jukebox]:
        """Return every jukebox matching all requested dimensions.

        With no dimension requested the whole store is returned.
        Raises :class:`InvalidFilterError` if a dimension cannot be
        evaluated, e.g. an unknown setting id.
        """
        candidates: List[List[Jukebox]] = []
        if query.ids:
            candidates.append(self.jukeboxes.filter_by_ids(query.ids))
        if query.models:
            candidates.append(self.jukeboxes.filter_by_models(query.models))
        if query.setting_id is not None:
            candidates.append(self.jukeboxes.filter_by_setting(query.setting_id))

        if not candidates:
            return self.jukeboxes.all()

        result = candidates[0]
        for other in candidates[1:]:
            result = JukeboxService.intersect(result, other)
        return result

    def run(self, query: JukeboxQuery) -> List[Jukebox]:
        """Select and paginate.

        Invalid filter input is logged and answered with an empty page,
        the same observable result as a query that matched nothing.
        """
        logger.debug("Jukebox query on %s", query.dimensions() or "all records")
        try:
            matches = self.select(query)
        except InvalidFilterError as exc:
            logger.info("Query cannot match any jukebox: %s", exc)
            matches = []
        return paginate(matches, query.offset, query.limit)

    def render(self, query: JukeboxQuery) -> str:
        return render_jukeboxes(self.run(query))
