"""Shared fixtures: a throwaway SQLite database per test"""
import pytest
from fastapi.testclient import TestClient

from property_inventory.config import Settings
from property_inventory.database import build_engine, build_session_maker, init_db, close_db
from property_inventory.main import create_app


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a fresh database file"""
    return Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'properties.db'}",
    )


@pytest.fixture
def client(settings):
    """Test client with the lifespan (provisioning) already run"""
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
async def engine(settings):
    """Provisioned async engine"""
    engine = build_engine(settings)
    await init_db(engine)
    yield engine
    await close_db(engine)


@pytest.fixture
async def session(engine):
    async with build_session_maker(engine)() as session:
        yield session


@pytest.fixture
def berlin_payload():
    return {
        "location": "Berlin",
        "square_meters": 50,
        "price_per_square_meter": 3000,
        "owner": "A",
        "country": "DE",
        "region": "Berlin",
        "province": "Berlin",
        "district": "Mitte",
    }
