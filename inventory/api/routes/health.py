from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from inventory.api.deps import get_session_factory
from inventory.core.config import Settings, get_settings
from inventory.schemas.health import ConnectivityReport
from inventory.services.connectivity import check_connectivity

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/db", response_model=ConnectivityReport)
async def database_health_check(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
    settings: Settings = Depends(get_settings),
) -> ConnectivityReport:
    """Read a bounded slice of products to prove the database answers."""

    result = await check_connectivity(session_factory, settings.check_limit)
    if not result.ok:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=result.error)
    return ConnectivityReport(status="ok", products=result.products)
