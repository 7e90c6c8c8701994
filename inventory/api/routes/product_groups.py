from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from inventory import models
from inventory.api.deps import get_db
from inventory.schemas.product import ProductGroupDetail, ProductGroupRead

router = APIRouter(prefix="/product-groups", tags=["product-groups"])


@router.get("/", response_model=list[ProductGroupRead])
async def list_product_groups(db: AsyncSession = Depends(get_db)) -> list[ProductGroupRead]:
    """Return all product groups ordered by name."""

    statement = select(models.ProductGroup).order_by(models.ProductGroup.name)
    return list(await db.scalars(statement))


@router.get("/{group_id}", response_model=ProductGroupDetail)
async def get_product_group(group_id: int, db: AsyncSession = Depends(get_db)) -> ProductGroupDetail:
    """Return a product group together with its products."""

    stmt = (
        select(models.ProductGroup)
        .options(selectinload(models.ProductGroup.products))
        .where(models.ProductGroup.id == group_id)
    )
    group = await db.scalar(stmt)
    if group is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product group not found")

    group.products.sort(key=lambda product: product.name)
    return group
