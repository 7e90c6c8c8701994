import asyncio
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import pool

from inventory.api.deps import get_session_factory
from inventory.db.base import Base
from inventory.db.session import build_engine, build_session_factory
from inventory.main import app


def sqlite_url(path: Path) -> str:
    return f"sqlite+aiosqlite:///{path}"


async def _create_schema(url: str) -> None:
    engine = build_engine(url, poolclass=pool.NullPool)
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)
    await engine.dispose()


async def _add_records(url: str, records: tuple[Base, ...]) -> None:
    engine = build_engine(url, poolclass=pool.NullPool)
    async with build_session_factory(engine)() as session:
        session.add_all(records)
        await session.commit()
    await engine.dispose()


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    url = sqlite_url(tmp_path / "inventory.db")
    asyncio.run(_create_schema(url))
    return url


@pytest.fixture
def seed(database_url: str) -> Callable[..., None]:
    def _seed(*records: Base) -> None:
        asyncio.run(_add_records(database_url, records))

    return _seed


@pytest.fixture
def client(database_url: str) -> Iterator[TestClient]:
    engine = build_engine(database_url, poolclass=pool.NullPool)
    session_factory = build_session_factory(engine)
    app.dependency_overrides[get_session_factory] = lambda: session_factory

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    asyncio.run(engine.dispose())


@pytest.fixture
def missing_database_url(tmp_path: Path) -> str:
    return sqlite_url(tmp_path / "missing" / "inventory.db")
