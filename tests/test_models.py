"""
Unit tests for jukebox_api/app/models
"""

import pytest

from jukebox_api.app.models import Jukebox, Setting, count_components


@pytest.mark.unit
class TestJukebox:
    """Test the jukebox record and its component helpers."""

    def test_fields(self):
        jukebox = Jukebox("id", "model", ["comp1", "comp2", "comp1"])
        assert jukebox.id == "id"
        assert jukebox.model == "model"
        assert jukebox.components == ["comp1", "comp2", "comp1"]

    def test_component_counts(self):
        jukebox = Jukebox("1", "fusion", ["pcb", "led", "pcb"])
        assert jukebox.component_counts() == {"pcb": 2, "led": 1}

    def test_equality_includes_duplicate_counts(self):
        assert Jukebox("1", "X", ["pcb", "pcb"]) == Jukebox("1", "X", ["pcb", "pcb"])
        assert Jukebox("1", "X", ["pcb", "pcb"]) != Jukebox("1", "X", ["pcb"])
        assert Jukebox("1", "X", ["pcb"]) != Jukebox("1", "Y", ["pcb"])
        assert Jukebox("1", "X", ["pcb"]) != Jukebox("2", "X", ["pcb"])

    def test_get_component_ignores_case_and_whitespace(self):
        jukebox = Jukebox("1", "fusion", ["PCB", "led"])
        assert jukebox.get_component("  pcb ") == "PCB"
        assert jukebox.get_component("LED") == "led"
        assert jukebox.get_component("camera") is None

    def test_add_component_normalises(self):
        jukebox = Jukebox("1", "fusion", [])
        assert jukebox.add_component("  Camera ") == "camera"
        assert jukebox.components == ["camera"]

    def test_add_blank_component_rejected(self):
        jukebox = Jukebox("1", "fusion", [])
        with pytest.raises(ValueError):
            jukebox.add_component("   ")
        assert jukebox.components == []

    def test_remove_component_removes_one_occurrence(self):
        jukebox = Jukebox("1", "fusion", ["pcb", "Led", "pcb"])
        assert jukebox.remove_component("LED") == "Led"
        assert jukebox.remove_component("pcb") == "pcb"
        assert jukebox.components == ["pcb"]

    def test_remove_missing_component(self):
        jukebox = Jukebox("1", "fusion", ["pcb"])
        assert jukebox.remove_component("camera") is None
        with pytest.raises(ValueError):
            jukebox.remove_component("")
        assert jukebox.components == ["pcb"]


@pytest.mark.unit
class TestSetting:
    """Test the setting record."""

    def test_required_counts(self):
        setting = Setting("s", ("pcb", "pcb", "camera"))
        assert setting.required_counts() == {"pcb": 2, "camera": 1}

    def test_count_components_empty(self):
        assert count_components([]) == {}
