"""Service test fixtures — async DB, mocked geocoder, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - The geocoding provider is an httpx.MockTransport; tests mutate
      geocoding_reply to change what it answers and read geocoding_calls
    - The client's app has its ContactService injected directly (the ASGI
      transport does not run the lifespan)
"""

import httpx
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from contact_api.config import Settings
from contact_api.db.base import Base
from contact_api.infrastructure.database import DatabaseSessionManager
from contact_api.infrastructure.geocoding_client import GeocodingClient
from contact_api.main import create_app
from contact_api.models.contact import Contact
from contact_api.services.contact_service import ContactService

STOCKHOLM = {"lat": 59.3251172, "lng": 18.0710935}


@pytest.fixture
def valid_payload() -> dict:
    return {
        "firstname": "Test",
        "lastname": "Alm",
        "email": "testuser123@gmail.com",
        "personalnumber": "550713-1405",
        "address": "Testgatan",
        "zipCode": "12345",
        "city": "Teststad",
        "country": "Testland",
    }


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def geocoding_reply() -> dict:
    """Keyword arguments for the next httpx.Response, or {"raise": exc}."""
    return {"status_code": 200, "json": dict(STOCKHOLM)}


@pytest.fixture
def geocoding_calls() -> list:
    return []


@pytest.fixture
async def geocoder(geocoding_reply, geocoding_calls):
    def handler(request: httpx.Request) -> httpx.Response:
        geocoding_calls.append(request)
        if "raise" in geocoding_reply:
            raise geocoding_reply["raise"]
        return httpx.Response(**geocoding_reply)

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = GeocodingClient(
        "https://geocoder.test/api/geocoding",
        api_key="test-geocoding-key",
        http_client=http_client,
    )
    yield client
    await http_client.aclose()


@pytest.fixture
def contact_service(test_engine, geocoder) -> ContactService:
    return ContactService(DatabaseSessionManager.from_engine(test_engine), geocoder)


@pytest.fixture
async def client(contact_service):
    """FastAPI test client with the service injected on app.state."""
    app = create_app(Settings(database_url="sqlite+aiosqlite:///:memory:"))
    app.state.contact_service = contact_service
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def seed_contact(test_db):
    """Insert one contact directly into the test DB."""
    contact = Contact(
        firstname="Jane",
        lastname="Doe",
        email="jane.doe@example.com",
        personalnumber="800101-1234",
        address="Drottninggatan 1",
        zip_code="11151",
        city="Stockholm",
        country="Sweden",
    )
    test_db.add(contact)
    await test_db.commit()
    await test_db.refresh(contact)
    return contact
