"""Service test fixtures - async in-memory DB, seeded collections, real-service client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Seeded: collection "posts" with fields title/body/published_on,
      empty collection "tags", system collection "fieldhub_users" with field "email"
    - get_db overridden; the real SqlSchemaService runs behind the routes
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from fieldhub.db.base import Base
from fieldhub.infrastructure.database import get_db
from fieldhub.main import app
from fieldhub.models.collection import Collection
from fieldhub.models.field import Field
from fieldhub.services.schema_service import SqlSchemaService



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
async def seeded(test_db):
    """Insert the baseline collections and fields."""
    test_db.add_all([
        Collection(name="posts"),
        Collection(name="tags"),
        Collection(name="fieldhub_users"),
    ])
    await test_db.flush()
    test_db.add_all([
        Field(collection="posts", field="title", type="string", sort=1),
        Field(collection="posts", field="body", type="text", sort=2),
        Field(collection="posts", field="published_on", type="datetime"),
        Field(collection="fieldhub_users", field="email", type="string"),
    ])
    await test_db.commit()
    return test_db


@pytest.fixture
def admin_service(seeded):
    return SqlSchemaService(
        seeded, system_collection_prefix="fieldhub_", is_admin=True,
    )


@pytest.fixture
def reader_service(seeded):
    return SqlSchemaService(
        seeded, system_collection_prefix="fieldhub_", is_admin=False,
    )


@pytest.fixture
async def db_client(test_session_factory, seeded):
    """FastAPI test client with the real Schema Service over the test DB."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
