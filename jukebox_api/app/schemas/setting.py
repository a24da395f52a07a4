"""
Pydantic schemas for settings.

``SettingsDocument`` validates the startup source, which wraps the
list of settings in a top‑level ``settings`` key.  ``SettingRead``
adds the computed ``required_counts`` for API responses.
"""

from typing import Dict, List

from pydantic import BaseModel, Field

from jukebox_api.app.models import Setting


class SettingPayload(BaseModel):
    id: str = Field(..., example="515ef38b-0529-418f-a93a-7f2347fc5805")
    requires: List[str] = Field(default_factory=list, example=["camera", "pcb"])

    model_config = {"coerce_numbers_to_str": True}

    def to_model(self) -> Setting:
        return Setting(id=self.id, requires=tuple(self.requires))


class SettingsDocument(BaseModel):
    settings: List[SettingPayload] = Field(default_factory=list)


class SettingRead(BaseModel):
    """Schema for reading a setting from the API."""

    id: str
    requires: List[str]
    required_counts: Dict[str, int]

    @classmethod
    def from_model(cls, setting: Setting) -> "SettingRead":
        return cls(
            id=setting.id,
            requires=list(setting.requires),
            required_counts=setting.required_counts(),
        )
