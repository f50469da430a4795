"""Entities module with entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model with business logic
- table.py: Database persistence model
- schemas.py: Request and response transfer objects
- repository.py: Data access layer
"""

from .service.product import (
    InMemoryProductRepository,
    Product,
    ProductRepository,
    ProductTable,
    SqlProductRepository,
)

__all__ = [
    "Product",
    "ProductTable",
    "ProductRepository",
    "InMemoryProductRepository",
    "SqlProductRepository",
]
