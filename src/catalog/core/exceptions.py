"""Catalog domain exceptions.

Raised by the stores and the service layer. The HTTP application translates
them into status-coded responses.
"""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for errors raised by the catalog domain."""


class ProductNotFoundError(CatalogError):
    """The requested product identity does not exist in the store."""

    def __init__(self, product_id: int) -> None:
        self.product_id = product_id
        super().__init__(f"Product {product_id} not found")
