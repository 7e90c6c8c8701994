from pydantic import BaseModel

from inventory.schemas.product import ProductRead


class ConnectivityReport(BaseModel):
    status: str
    products: list[ProductRead]
