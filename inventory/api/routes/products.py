from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from inventory import models
from inventory.api.deps import get_db
from inventory.schemas.product import ProductRead

router = APIRouter(prefix="/products", tags=["products"])


@router.get("/", response_model=list[ProductRead])
async def list_products(
    group_id: int | None = Query(default=None, ge=0),
    limit: int = Query(default=50, ge=1, le=200),
    db: AsyncSession = Depends(get_db),
) -> list[ProductRead]:
    """Return products ordered by id, each with its group.

    ``group_id=0`` selects products that are not assigned to any group.
    """

    stmt = select(models.Product).options(selectinload(models.Product.group))
    if group_id == 0:
        stmt = stmt.where(models.Product.group_id.is_(None))
    elif group_id is not None:
        stmt = stmt.where(models.Product.group_id == group_id)

    stmt = stmt.order_by(models.Product.id).limit(limit)
    return list(await db.scalars(stmt))


@router.get("/{product_id}", response_model=ProductRead)
async def get_product(product_id: int, db: AsyncSession = Depends(get_db)) -> ProductRead:
    """Retrieve a single product and its group."""

    stmt = (
        select(models.Product)
        .options(selectinload(models.Product.group))
        .where(models.Product.id == product_id)
    )
    product = await db.scalar(stmt)
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return product
