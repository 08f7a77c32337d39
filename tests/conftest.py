"""
Pytest configuration and fixtures for geoipfinder tests.
"""

import json

import pytest
from unittest.mock import MagicMock

from geoipfinder import GeoIP2Adapter, GeoIPResolver, GeoRecord


HAMBURG_IP = "74.200.247.59"

HAMBURG_RECORD = {
    "city": {"geoname_id": 2911298, "names": {"de": "Hamburg", "en": "Hamburg", "es": "Hamburgo", "fr": "Hambourg"}},
    "continent": {"code": "EU", "geoname_id": 6255148, "names": {"de": "Europa", "en": "Europe", "es": "Europa"}},
    "country": {"geoname_id": 2921044, "iso_code": "DE", "names": {"de": "Deutschland", "en": "Germany", "es": "Alemania"}},
    "location": {"latitude": 53.55, "longitude": 10, "time_zone": "Europe/Berlin"},
    "registered_country": {"geoname_id": 2921044, "iso_code": "DE", "names": {"de": "Deutschland", "en": "Germany"}},
    "subdivisions": [
        {"geoname_id": 2911297, "iso_code": "HH", "names": {"de": "Hamburg", "en": "Hamburg", "fr": "Hambourg"}},
    ],
    "traits": {"ip_address": HAMBURG_IP},
}


class FakeAdapter(GeoIP2Adapter):
    """Adaptador de test: devuelve un contenido fijo o lanza una excepción."""

    def __init__(self, content=None, error=None):
        super().__init__()
        self.content = content
        self.error = error
        self.calls = []
        self.closed = False

    def get_content(self, ip):
        self.calls.append((ip, self.locale))
        if self.error is not None:
            raise self.error
        return GeoRecord.from_raw(self.content)

    def close(self):
        self.closed = True


@pytest.fixture
def make_adapter():
    """Fábrica de FakeAdapter: make_adapter(content=..., error=...)."""
    return FakeAdapter


@pytest.fixture
def hamburg_json():
    return json.dumps(HAMBURG_RECORD)


@pytest.fixture
def fake_adapter():
    return FakeAdapter(HAMBURG_RECORD)


@pytest.fixture
def resolver(fake_adapter):
    """GeoIPResolver sobre un adaptador con el registro de Hamburgo."""
    return GeoIPResolver(fake_adapter)


@pytest.fixture
def mock_adapter():
    """Adaptador MagicMock con set_locale encadenable."""
    adapter = MagicMock(spec=GeoIP2Adapter)
    adapter.set_locale.return_value = adapter
    adapter.get_content.return_value = GeoRecord()
    return adapter


def pytest_addoption(parser):
    """Add --integration command line option."""
    parser.addoption(
        "--integration", action="store_true", default=False, help="run integration tests"
    )


def pytest_collection_modifyitems(config, items):
    """Skip tests marked with 'integration' unless --integration is provided."""
    if config.getoption("--integration"):
        return
    skip_integration = pytest.mark.skip(reason="need --integration option to run")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)
