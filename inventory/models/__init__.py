from inventory.models.product import Product
from inventory.models.product_group import ProductGroup

__all__ = ["Product", "ProductGroup"]
