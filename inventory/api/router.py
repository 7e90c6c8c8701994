from fastapi import APIRouter

from inventory.api.routes import product_groups, products

api_router = APIRouter()
api_router.include_router(products.router)
api_router.include_router(product_groups.router)
