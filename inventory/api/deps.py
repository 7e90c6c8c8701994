from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from inventory.core.config import get_settings
from inventory.db.session import build_engine, build_session_factory


@lru_cache
def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Build the application's engine and session factory on first use."""

    settings = get_settings()
    return build_session_factory(build_engine(settings.database_url))


async def get_db(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> AsyncGenerator[AsyncSession, None]:
    """Provide a scoped database session dependency."""

    db = session_factory()
    try:
        yield db
    finally:
        await db.close()
