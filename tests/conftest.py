import os

import httpx
import pytest

from thelemicdate import compute
from thelemicdate.models import GeoResult


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep developer THELEMIC_DATE_* settings out of the tests."""
    for key in list(os.environ):
        if key.startswith("THELEMIC_DATE_"):
            monkeypatch.delenv(key)


@pytest.fixture
def utc_geo():
    return GeoResult(latitude=0.0, longitude=0.0, timezone_id="Etc/UTC", display_name="Null Island")


@pytest.fixture
def london_geo():
    return GeoResult(
        latitude=51.4779, longitude=-0.0015, timezone_id="Europe/London", display_name="Greenwich"
    )


@pytest.fixture
def vegas_geo():
    return GeoResult(
        latitude=36.1672559,
        longitude=-115.148516,
        timezone_id="America/Los_Angeles",
        display_name="Las Vegas, Clark County, Nevada, United States",
    )


@pytest.fixture
def fixed_location(monkeypatch):
    """Replace the geocoder with a fixed result. Returns the list of looked-up strings."""
    calls: list[str] = []

    def install(geo: GeoResult | Exception):
        def fake(location, settings=None, client=None):
            calls.append(location)
            if isinstance(geo, Exception):
                raise geo
            return geo

        monkeypatch.setattr(compute, "resolve_location", fake)
        return calls

    return install


@pytest.fixture
def mock_client():
    """httpx.Client whose transport answers with `handler(request)`."""
    clients: list[httpx.Client] = []

    def make(handler) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield make
    for client in clients:
        client.close()
