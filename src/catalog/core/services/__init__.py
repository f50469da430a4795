"""Core services exports."""

# Database Service
from .database.db_session import DbSessionService

# Product Services
from .product.product_service import ProductService

__all__ = [
    # Database Service
    "DbSessionService",
    # Product Services
    "ProductService",
]
