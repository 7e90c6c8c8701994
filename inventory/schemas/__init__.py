from inventory.schemas.health import ConnectivityReport
from inventory.schemas.product import ProductGroupDetail, ProductGroupRead, ProductRead, ProductSummary

__all__ = [
	"ConnectivityReport",
	"ProductGroupDetail",
	"ProductGroupRead",
	"ProductRead",
	"ProductSummary",
]
