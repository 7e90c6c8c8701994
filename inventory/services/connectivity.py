"""Database connectivity check against the product catalog.

Runs one bounded read of ``products`` with each product's group loaded in the
same call, and reports either a ``Success:`` or an ``Error:`` line. Every
failure between acquiring the store handle and reading the rows is treated
the same way: logged, reported, never re-raised.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import TextIO

from pydantic import TypeAdapter
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from inventory import models
from inventory.core.config import Settings
from inventory.db.session import build_engine, build_session_factory
from inventory.schemas.product import ProductRead

logger = logging.getLogger(__name__)

_products_adapter = TypeAdapter(list[ProductRead])


@dataclass
class ConnectivityResult:
    ok: bool
    products: list[ProductRead] = field(default_factory=list)
    error: str | None = None

    @classmethod
    def success(cls, products: list[ProductRead]) -> ConnectivityResult:
        return cls(ok=True, products=products)

    @classmethod
    def failure(cls, exc: Exception) -> ConnectivityResult:
        return cls(ok=False, error=_single_line(exc))

    def render(self) -> str:
        """Return the console line for this outcome."""

        if self.ok:
            data = _products_adapter.dump_json(self.products).decode()
            return f"Success: {data}"
        return f"Error: {self.error}"


def _single_line(exc: Exception) -> str:
    # Driver errors carry a trailing "(Background on this error at ...)" line.
    message = " ".join(part.strip() for part in str(exc).splitlines() if part.strip())
    return message or exc.__class__.__name__


async def fetch_products(session: AsyncSession, limit: int) -> list[ProductRead]:
    """Read at most ``limit`` products with their group eager-loaded."""

    if limit < 1:
        raise ValueError("limit must be at least 1")

    stmt = (
        select(models.Product)
        .options(selectinload(models.Product.group))
        .order_by(models.Product.id)
        .limit(limit)
    )
    products = (await session.scalars(stmt)).all()
    return [ProductRead.model_validate(product) for product in products]


async def check_connectivity(
    session_factory: async_sessionmaker[AsyncSession],
    limit: int,
) -> ConnectivityResult:
    """Run the bounded product read inside one session scope.

    The engine behind ``session_factory`` is left open; whoever built it
    disposes it.
    """

    try:
        async with session_factory() as session:
            products = await fetch_products(session, limit)
    except Exception as exc:
        logger.debug("Connectivity check failed", exc_info=True)
        return ConnectivityResult.failure(exc)

    logger.debug("Connectivity check read %d product(s)", len(products))
    return ConnectivityResult.success(products)


async def run_connectivity_check(
    settings: Settings,
    *,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> ConnectivityResult:
    """Connect, query, report, and disconnect.

    Writes ``Success: <json>`` to ``stdout`` or ``Error: <message>`` to
    ``stderr``. The engine is disposed on both paths.
    """

    out = stdout if stdout is not None else sys.stdout
    err = stderr if stderr is not None else sys.stderr

    engine: AsyncEngine | None = None
    try:
        try:
            engine = build_engine(settings.database_url)
        except Exception as exc:
            logger.debug("Could not create database engine", exc_info=True)
            result = ConnectivityResult.failure(exc)
        else:
            result = await check_connectivity(build_session_factory(engine), settings.check_limit)
    finally:
        if engine is not None:
            await engine.dispose()

    if result.ok:
        print(result.render(), file=out)
    else:
        print(result.render(), file=err)
    return result
