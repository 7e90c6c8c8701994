from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Index, Numeric, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inventory.db.base_class import Base


class Product(Base):
    """Catalog product, optionally assigned to a product group."""

    __tablename__ = "products"
    __table_args__ = (Index("products_group_id_idx", "group_id"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    sku: Mapped[str] = mapped_column(String, unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String, nullable=False)
    unit: Mapped[str | None] = mapped_column(String, nullable=True)
    units_per_box: Mapped[Decimal | None] = mapped_column(Numeric(12, 4), nullable=True)
    sell_price: Mapped[Decimal | None] = mapped_column(Numeric(12, 4), nullable=True)
    group_id: Mapped[int | None] = mapped_column(ForeignKey("product_groups.id", ondelete="SET NULL"), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    group = relationship("ProductGroup", back_populates="products")
