"""
Error types raised by the jukebox service.

``DataLoadError`` is fatal: it escapes the startup hook so the server
never serves an empty catalog.  ``InvalidFilterError`` marks a filter
request that could not be evaluated at all, as opposed to one that
simply matched nothing (which yields an empty list).
"""

from typing import Optional


class JukeboxAPIError(Exception):
    """Base class for all errors raised by this package."""


class DataLoadError(JukeboxAPIError):
    """A startup data source could not be fetched or parsed."""

    def __init__(self, source: str, message: str) -> None:
        super().__init__(f"Failed to load {source}: {message}")
        self.source = source
        self.message = message


class InvalidFilterError(JukeboxAPIError, ValueError):
    """Filter input that cannot be evaluated (e.g. empty requirements)."""


class SettingNotFoundError(InvalidFilterError, LookupError):
    """The requested setting id is not in the settings index."""

    def __init__(self, setting_id: Optional[str]) -> None:
        super().__init__(f"Setting {setting_id!r} not found")
        self.setting_id = setting_id
