"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts against the public jukebox and settings documents
without any configuration.  In a deployment you should point the
source URLs at your own copies of the data.
"""

import os
from dataclasses import dataclass
from typing import Optional


_SOURCE_ROOT = "http://my-json-server.typicode.com/touchtunes/tech-assignment"


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Jukebox API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Documents fetched once at startup.  The jukebox source is a JSON
    # array of ``{id, model, components: [{name}]}`` objects; the
    # settings source is ``{"settings": [{id, requires: [...]}]}``.
    jukebox_source_url: str = os.getenv("JUKEBOX_SOURCE_URL", f"{_SOURCE_ROOT}/jukes")
    settings_source_url: str = os.getenv("SETTINGS_SOURCE_URL", f"{_SOURCE_ROOT}/settings")

    # Connect/read timeout in seconds for the startup fetch.  The
    # service refuses to start rather than hang on a dead source.
    source_timeout: float = float(os.getenv("SOURCE_TIMEOUT", "10"))

    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class creation time, environment variables should
# be set before importing this module.
settings = Settings()
