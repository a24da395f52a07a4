"""
Unit tests for jukebox_api/app/services/settings_service.py
"""

import pytest

from jukebox_api.app.core.exceptions import InvalidFilterError, SettingNotFoundError
from jukebox_api.app.models import Setting
from jukebox_api.app.services.settings_service import SettingsIndex


@pytest.mark.unit
class TestSettingsIndex:
    """Test lookups on the settings index."""

    def test_lookup(self, catalog):
        index = catalog.settings
        assert len(index) == 4
        assert "s-camera" in index
        assert index.get("s-camera") == Setting("s-camera", ("camera",))
        assert index.get("nope") is None

    def test_all_keeps_source_order(self, catalog):
        assert [setting.id for setting in catalog.settings.all()] == [
            "s-camera",
            "s-double-pcb",
            "s-pcb-led",
            "s-amplifier",
        ]

    def test_required_counts(self, catalog):
        assert catalog.settings.required_counts("s-double-pcb") == {"pcb": 2}

    def test_required_counts_unknown_id(self, catalog):
        with pytest.raises(SettingNotFoundError) as excinfo:
            catalog.settings.required_counts("Not a valid setting ID")
        assert excinfo.value.setting_id == "Not a valid setting ID"
        assert isinstance(excinfo.value, InvalidFilterError)
        assert isinstance(excinfo.value, LookupError)

    def test_duplicate_ids_last_definition_wins(self):
        index = SettingsIndex([Setting("s", ("pcb",)), Setting("s", ("led",))])
        assert len(index) == 1
        assert index.get("s").requires == ("led",)
