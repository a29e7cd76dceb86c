import asyncio

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool

from src.database import Base, build_engine, get_db
from src.locales.registry import LocaleRegistry
from src.main import app
from src.redis.client import redis_client


class InMemoryRedis:
    """Subset of the redis.asyncio hash API backed by dicts."""

    def __init__(self):
        self.hashes = {}

    async def hget(self, key, field):
        return self.hashes.get(key, {}).get(field)

    async def hgetall(self, key):
        return dict(self.hashes.get(key, {}))

    async def hset(self, key, field, value):
        bucket = self.hashes.setdefault(key, {})
        created = field not in bucket
        bucket[field] = value
        return int(created)

    async def hdel(self, key, *fields):
        bucket = self.hashes.get(key, {})
        removed = sum(1 for field in fields if bucket.pop(field, None) is not None)
        if not bucket:
            self.hashes.pop(key, None)
        return removed

    async def delete(self, *keys):
        return sum(1 for key in keys if self.hashes.pop(key, None) is not None)


@pytest.fixture
def registry():
    return LocaleRegistry(("en", "pt", "fr", "jp"), default="en", fallback="en")


@pytest.fixture
def fake_redis():
    client = InMemoryRedis()
    redis_client.use(client)
    yield client
    redis_client.use(None)


def _make_engine(tmp_path):
    return build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)


async def _create_tables(engine):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@pytest.fixture
async def engine(tmp_path):
    """Engine on a fresh SQLite database."""
    engine = _make_engine(tmp_path)
    await _create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session(engine):
    session_maker = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        yield session


@pytest.fixture
def client(tmp_path, fake_redis):
    """TestClient whose get_db dependency uses a fresh SQLite database."""
    engine = _make_engine(tmp_path)
    asyncio.run(_create_tables(engine))
    session_maker = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        asyncio.run(engine.dispose())
