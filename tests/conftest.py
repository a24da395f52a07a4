"""
Pytest fixtures and configuration for the test suite.

Tests run against a small in-memory catalog; nothing here touches the
network.  The loader is exercised through a fake ``requests`` session.
"""

import pytest
import requests
from fastapi.testclient import TestClient

from jukebox_api.app.main import create_app
from jukebox_api.app.models import Jukebox, Setting
from jukebox_api.app.services.catalog import Catalog


JUKEBOX_DOCUMENT = [
    {"id": "1", "model": "fusion", "components": [{"name": "pcb"}, {"name": "led"}, {"name": "speaker"}]},
    {"id": "2", "model": "angelina", "components": [{"name": "pcb"}, {"name": "pcb"}, {"name": "camera"}]},
    {"id": "3", "model": "fusion", "components": [{"name": "money_pcb"}, {"name": "led"}]},
    {"id": "4", "model": "virtuo", "components": [{"name": "pcb"}, {"name": "pcb"}, {"name": "led"}, {"name": "camera"}]},
]

SETTINGS_DOCUMENT = {
    "settings": [
        {"id": "s-camera", "requires": ["camera"]},
        {"id": "s-double-pcb", "requires": ["pcb", "pcb"]},
        {"id": "s-pcb-led", "requires": ["pcb", "led"]},
        {"id": "s-amplifier", "requires": ["amplifier"]},
    ]
}


def make_jukeboxes():
    return [
        Jukebox(id=item["id"], model=item["model"], components=[c["name"] for c in item["components"]])
        for item in JUKEBOX_DOCUMENT
    ]


def make_settings():
    return [Setting(id=item["id"], requires=tuple(item["requires"])) for item in SETTINGS_DOCUMENT["settings"]]


@pytest.fixture
def jukeboxes():
    return make_jukeboxes()


@pytest.fixture
def catalog():
    return Catalog.build(make_jukeboxes(), make_settings())


@pytest.fixture
def client(catalog):
    """TestClient over an app serving the sample catalog."""
    with TestClient(create_app(catalog=catalog)) as test_client:
        yield test_client


class FakeResponse:
    """Minimal stand-in for ``requests.Response``."""

    def __init__(self, data=None, status_code=200, invalid_json=False):
        self._data = data
        self.status_code = status_code
        self._invalid_json = invalid_json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        if self._invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._data


class FakeSession:
    """Serve canned responses by URL; unknown URLs fail like a dead host."""

    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if url not in self.responses:
            raise requests.ConnectionError(f"Failed to establish a new connection: {url}")
        return self.responses[url]


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as exercising the HTTP application")
