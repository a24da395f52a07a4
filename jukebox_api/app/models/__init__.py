"""
Domain records held in memory.

These are plain dataclasses rather than Pydantic models: they are
built once from validated payloads (see ``schemas``) and compared by
value inside the filter engine.
"""

from .jukebox import Jukebox, count_components
from .setting import Setting

__all__ = ["Jukebox", "Setting", "count_components"]
