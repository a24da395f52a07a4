"""
Pydantic schemas for jukebox data.

The same shape is used for the startup source document and for
responses: ``{"id", "model", "components": [{"name"}]}``.
"""

from typing import List

from pydantic import BaseModel, Field

from jukebox_api.app.models import Jukebox


class ComponentPayload(BaseModel):
    name: str = Field(..., example="pcb")

    model_config = {"coerce_numbers_to_str": True}


class JukeboxPayload(BaseModel):
    """A jukebox as it appears in the source document and in responses."""

    id: str = Field(..., example="5ca94a8ac470d3e47cd4713c")
    model: str = Field(..., example="fusion")
    components: List[ComponentPayload] = Field(default_factory=list)

    model_config = {"coerce_numbers_to_str": True}

    def to_model(self) -> Jukebox:
        return Jukebox(
            id=self.id,
            model=self.model,
            components=[component.name for component in self.components],
        )

    @classmethod
    def from_model(cls, jukebox: Jukebox) -> "JukeboxPayload":
        return cls(
            id=jukebox.id,
            model=jukebox.model,
            components=[ComponentPayload(name=name) for name in jukebox.components],
        )
