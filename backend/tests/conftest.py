"""
Shared fixtures.

The NeoWs upstream is never contacted: ``mock_client`` builds an
``httpx.AsyncClient`` on top of ``httpx.MockTransport`` and records every
request it serves.
"""
import httpx
import pytest

from app.core.config import Settings
from factories import close_clients, make_neo


@pytest.fixture
def settings_fixture() -> Settings:
    return Settings(NASA_API_KEY="test-key", _env_file=None)


@pytest.fixture
def feed_payload():
    """
    Two days of objects. Expected order after sorting:
    2000433 (HIGH, 300 m), 3542519 (HIGH, 150 m), 2465633 (HIGH, 60 m),
    3726710 (MEDIUM), 3843641 (LOW, 20 m, no approach data), 54016476 (LOW, 10 m).
    """
    return {
        "element_count": 6,
        "near_earth_objects": {
            "2024-01-01": [
                make_neo("2465633", "465633 (2009 JR5)", True, 60.0, 16.0, 1_500_000, "2024-01-01"),
                make_neo("2000433", "433 Eros (A898 PA)", True, 300.0, 30.0, 100_000, "2024-01-01"),
            ],
            "2024-01-02": [
                make_neo("54016476", "(2020 GE)", False, 10.0, 1.0, 5_000_000, "2024-01-02"),
                make_neo("3726710", "(2015 RC)", False, 60.0, 16.0, 1_000_000, "2024-01-02"),
                make_neo("3843641", "(2019 QY)", False, 20.0, with_approach=False),
                make_neo("3542519", "(2010 PK9)", False, 150.0, 26.0, 400_000, "2024-01-02"),
            ],
        },
    }


@pytest.fixture
def mock_client():
    """
    Factory: ``mock_client(payload)`` or ``mock_client(handler=fn)``.
    The returned client has a ``.requests`` list of served requests.
    Every client built here is closed on teardown.
    """
    clients = []

    def _factory(payload=None, handler=None, status_code=200):
        requests = []

        def _handle(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if handler is not None:
                return handler(request)
            return httpx.Response(status_code, json=payload if payload is not None else {})

        client = httpx.AsyncClient(transport=httpx.MockTransport(_handle))
        client.requests = requests
        clients.append(client)
        return client

    _factory.clients = clients
    yield _factory
    close_clients(clients)
