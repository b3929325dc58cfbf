import os

# Keep spans local and never touch Postgres while testing
os.environ["OTLP_ENDPOINT"] = ""
os.environ.pop("PIZZA_CATALOG_PATH", None)

import httpx
import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlalchemy.pool import StaticPool

from services.order_service.catalog import Catalog
from services.order_service.main import create_tables, order_app
from shared.config.database import build_engine, get_db

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
async def engine():
    engine = build_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def catalog():
    return Catalog()


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    order_app.dependency_overrides[get_db] = override_get_db
    transport = httpx.ASGITransport(app=order_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    order_app.dependency_overrides.clear()
