# Import every model so Base.metadata is complete for Alembic and test setup.
from inventory.db.base_class import Base
from inventory.models import Product, ProductGroup  # noqa: F401

__all__ = ["Base"]
