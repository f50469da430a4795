"""Entity package: Product."""

from .entity import Product
from .repository import (
    InMemoryProductRepository,
    ProductRepository,
    SqlProductRepository,
)
from .schemas import ProductResponse, ProductSaveRequest, ProductUpdateRequest
from .table import ProductTable

__all__ = [
    "Product",
    "ProductTable",
    "ProductRepository",
    "InMemoryProductRepository",
    "SqlProductRepository",
    "ProductResponse",
    "ProductSaveRequest",
    "ProductUpdateRequest",
]
