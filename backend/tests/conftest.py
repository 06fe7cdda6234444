from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from app.main import app
from app.services.note_service import InMemoryNoteStore, note_service


def make_random_user(
    *,
    uuid: str = "7a0eed16-9430-4d68-901f-c0d4c1c3bf22",
    first: str = "Jane",
    last: str = "Doe",
    postcode: Any = 12345,
    number: int = 4512,
    street: str = "Main Street",
) -> dict[str, Any]:
    """One result as returned by randomuser.me, trimmed to the fields we read plus a few we ignore."""
    return {
        "gender": "female",
        "name": {"title": "Ms", "first": first, "last": last},
        "location": {
            "street": {"number": number, "name": street},
            "city": "Springfield",
            "state": "Oregon",
            "country": "United States",
            "postcode": postcode,
            "coordinates": {"latitude": "-69.8246", "longitude": "134.8719"},
        },
        "email": f"{first.lower()}.{last.lower()}@example.com",
        "login": {"uuid": uuid, "username": "bluefish123"},
        "phone": "(555) 123-4567",
        "picture": {
            "large": "https://randomuser.me/api/portraits/women/1.jpg",
            "medium": "https://randomuser.me/api/portraits/med/women/1.jpg",
            "thumbnail": "https://randomuser.me/api/portraits/thumb/women/1.jpg",
        },
        "nat": "US",
    }


def mock_response(status: int = 200, payload: Any = None, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status = status
    response.json = AsyncMock(return_value=payload)
    response.text = AsyncMock(return_value=text)
    return response


def mock_request_context(response: MagicMock) -> AsyncMock:
    context = AsyncMock()
    context.__aenter__.return_value = response
    context.__aexit__.return_value = None
    return context


def mock_client_session(session: MagicMock) -> AsyncMock:
    client_session = AsyncMock()
    client_session.__aenter__.return_value = session
    client_session.__aexit__.return_value = None
    return client_session


@pytest.fixture(autouse=True)
def _fresh_note_store():
    original = note_service.store
    note_service.store = InMemoryNoteStore()
    yield
    note_service.store = original


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
