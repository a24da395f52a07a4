"""
Settings index.

Maps a setting id to its requirement list.  Settings are keyed by id;
if the source document repeats an id, the last definition wins.
"""

from typing import Dict, Iterable, List, Optional

from jukebox_api.app.core.exceptions import SettingNotFoundError
from jukebox_api.app.models import Setting


class SettingsIndex:
    """Read‑only lookup of settings by id."""

    def __init__(self, settings: Iterable[Setting] = ()) -> None:
        self._settings: Dict[str, Setting] = {}
        for setting in settings:
            self._settings[setting.id] = setting

    def __len__(self) -> int:
        return len(self._settings)

    def __contains__(self, setting_id: object) -> bool:
        return setting_id in self._settings

    def all(self) -> List[Setting]:
        """Return every setting in source order."""
        return list(self._settings.values())

    def get(self, setting_id: str) -> Optional[Setting]:
        return self._settings.get(setting_id)

    def required_counts(self, setting_id: str) -> Dict[str, int]:
        """Return ``{component: minimum count}`` for a setting.

        Raises :class:`SettingNotFoundError` if the id is unknown.
        """
        setting = self.get(setting_id)
        if setting is None:
            raise SettingNotFoundError(setting_id)
        return setting.required_counts()
