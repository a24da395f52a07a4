"""Setting record: a named list of required components."""

from dataclasses import dataclass
from typing import Dict, Tuple

from .jukebox import count_components


@dataclass(frozen=True)
class Setting:
    """A requirement profile.

    ``requires`` lists component names; a name repeated ``n`` times
    means a jukebox needs at least ``n`` of that component.
    """

    id: str
    requires: Tuple[str, ...] = ()

    def required_counts(self) -> Dict[str, int]:
        return count_components(self.requires)
