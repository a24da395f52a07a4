"""
Jukebox store and filters.

``JukeboxService`` holds the jukeboxes loaded at startup and answers
the filters used by the query endpoint.  Every filter returns a list,
possibly empty, when nothing matches.  Input that cannot be evaluated
at all (an empty requirement mapping, an unknown setting) raises
:class:`InvalidFilterError` instead, so callers can tell "no match"
from "bad request" even though the query endpoint renders both as an
empty listing.

Combined filters are built with :meth:`JukeboxService.intersect`:
each dimension is filtered independently and the results are
intersected.
"""

from typing import Iterable, List, Mapping, Optional, Sequence

from jukebox_api.app.core.exceptions import InvalidFilterError
from jukebox_api.app.models import Jukebox
from jukebox_api.app.services.settings_service import SettingsIndex


class JukeboxService:
    """Filters over an in‑memory list of jukeboxes."""

    def __init__(self, jukeboxes: Iterable[Jukebox], settings: Optional[SettingsIndex] = None) -> None:
        self._jukeboxes = tuple(jukeboxes)
        self.settings = settings if settings is not None else SettingsIndex()

    def __len__(self) -> int:
        return len(self._jukeboxes)

    def all(self) -> List[Jukebox]:
        """Return every jukebox in source order."""
        return list(self._jukeboxes)

    def filter_by_id(self, jukebox_id: str) -> Optional[Jukebox]:
        """Return the first jukebox whose id equals ``jukebox_id`` exactly."""
        for jukebox in self._jukeboxes:
            if jukebox.id == jukebox_id:
                return jukebox
        return None

    def filter_by_ids(self, jukebox_ids: Iterable[str]) -> List[Jukebox]:
        """Look up each id in turn; unknown ids are skipped."""
        found = []
        for jukebox_id in jukebox_ids:
            jukebox = self.filter_by_id(jukebox_id)
            if jukebox is not None:
                found.append(jukebox)
        return found

    def filter_by_model(self, model: str) -> List[Jukebox]:
        return [jukebox for jukebox in self._jukeboxes if jukebox.model == model]

    def filter_by_models(self, models: Iterable[str]) -> List[Jukebox]:
        """Concatenate the matches of each requested model, in request order."""
        found: List[Jukebox] = []
        for model in models:
            found.extend(self.filter_by_model(model))
        return found

    def filter_by_component(self, name: str) -> List[Jukebox]:
        """Return the jukeboxes carrying ``name``, ignoring case."""
        return [jukebox for jukebox in self._jukeboxes if jukebox.has_component(name)]

    def filter_by_components(self, required: Optional[Mapping[str, int]]) -> List[Jukebox]:
        """Return the jukeboxes holding at least the required count of each component.

        A component the jukebox lacks counts as zero.  Raises
        :class:`InvalidFilterError` if ``required`` is empty or ``None``:
        an empty requirement is not a request for the whole store.
        """
        if not required:
            raise InvalidFilterError("At least one required component must be given")
        found = []
        for jukebox in self._jukeboxes:
            counts = jukebox.component_counts()
            if all(counts.get(name, 0) >= needed for name, needed in required.items()):
                found.append(jukebox)
        return found

    def filter_by_setting(self, setting_id: str) -> List[Jukebox]:
        """Return the jukeboxes that satisfy a setting's requirements.

        Raises :class:`SettingNotFoundError` for an unknown id.
        """
        return self.filter_by_components(self.settings.required_counts(setting_id))

    @staticmethod
    def intersect(first: Sequence[Jukebox], second: Sequence[Jukebox]) -> List[Jukebox]:
        """Return the jukeboxes of ``first`` that also appear in ``second``.

        Membership uses jukebox equality; the order of ``first`` is kept.
        """
        return [jukebox for jukebox in first if jukebox in second]
