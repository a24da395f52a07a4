"""
Jukebox record.

A jukebox has an identifier, a model name and a list of installed
component names.  The same component may appear several times; the
multiplicity matters when checking a setting's requirements, the
order does not.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional


def count_components(names: Iterable[str]) -> Dict[str, int]:
    """Return the multiset view of ``names`` as ``{name: occurrences}``."""
    return dict(Counter(names))


@dataclass
class Jukebox:
    """A jukebox and its installed components.

    Two jukeboxes are equal when id, model and the full component
    list (including duplicates) are equal.  ``id`` and ``model`` are
    not expected to change after creation; components can be changed
    through :meth:`add_component` and :meth:`remove_component`.
    """

    id: str
    model: str
    components: List[str] = field(default_factory=list)

    def component_counts(self) -> Dict[str, int]:
        return count_components(self.components)

    def get_component(self, name: str) -> Optional[str]:
        """Return the stored component matching ``name``, ignoring case.

        Surrounding whitespace in ``name`` is ignored.  Returns ``None``
        if the jukebox has no such component.
        """
        wanted = name.strip().lower()
        for component in self.components:
            if component.lower() == wanted:
                return component
        return None

    def has_component(self, name: str) -> bool:
        return self.get_component(name) is not None

    def add_component(self, name: str) -> str:
        """Install a component and return the stored name.

        Names are normalised to lower case without surrounding
        whitespace.  Raises ``ValueError`` for a blank name.
        """
        if name is None or not name.strip():
            raise ValueError("Component name must not be blank")
        normalised = name.strip().lower()
        self.components.append(normalised)
        return normalised

    def remove_component(self, name: str) -> Optional[str]:
        """Remove one occurrence of a component.

        Matching ignores case.  Returns the stored name that was
        removed, or ``None`` if the jukebox has no such component.
        Raises ``ValueError`` for a blank name.
        """
        if name is None or not name.strip():
            raise ValueError("Component name must not be blank")
        stored = self.get_component(name)
        if stored is None:
            return None
        self.components.remove(stored)
        return stored
