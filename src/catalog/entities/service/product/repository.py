"""Data-access layer for products.

``ProductRepository`` is the store interface the service depends on. Two
implementations are provided: a process-local in-memory store and a SQL store
backed by ``ProductTable``. Both hand out copies, so callers never hold the
authoritative record.
"""

from __future__ import annotations

import itertools
import threading
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from loguru import logger
from sqlalchemy import delete
from sqlmodel import Session, select

from src.catalog.core.exceptions import ProductNotFoundError
from src.catalog.entities.service.product.entity import Product
from src.catalog.entities.service.product.table import ProductTable

if TYPE_CHECKING:
    from src.catalog.core.services.database.db_session import DbSessionService

# SQLite INTEGER PRIMARY KEY is a signed 64-bit value
_ROW_ID_MIN = -(2**63)
_ROW_ID_MAX = 2**63 - 1


class ProductRepository(ABC):
    """Store of product entities keyed by identity."""

    backend: str

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Insert a product without identity, or replace the one with its identity.

        Raises:
            ProductNotFoundError: the product carries an identity that is not stored.
        """

    @abstractmethod
    def find_by_id(self, product_id: int) -> Product:
        """Return the product with the given identity.

        Raises:
            ProductNotFoundError: no such product.
        """

    @abstractmethod
    def find_all(self) -> list[Product]:
        """Return every stored product in insertion order."""

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Remove the product with the given identity.

        Raises:
            ProductNotFoundError: no such product.
        """

    @abstractmethod
    def clear(self) -> None:
        """Remove every product. Identities are still not reused afterwards."""


class InMemoryProductRepository(ProductRepository):
    """Process-local store. Every operation holds the store lock."""

    backend = "memory"

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._products: dict[int, Product] = {}
        self._ids = itertools.count(1)

    def save(self, product: Product) -> Product:
        with self._lock:
            if product.id is None:
                stored = product.model_copy(update={"id": next(self._ids)}, deep=True)
            else:
                existing = self._products.get(product.id)
                if existing is None:
                    raise ProductNotFoundError(product.id)
                stored = existing.model_copy(
                    update={
                        "name": product.name,
                        "price": product.price,
                        "updated_at": product.updated_at,
                    },
                    deep=True,
                )
            self._products[stored.id] = stored
            return stored.model_copy(deep=True)

    def find_by_id(self, product_id: int) -> Product:
        with self._lock:
            product = self._products.get(product_id)
            if product is None:
                raise ProductNotFoundError(product_id)
            return product.model_copy(deep=True)

    def find_all(self) -> list[Product]:
        with self._lock:
            return [product.model_copy(deep=True) for product in self._products.values()]

    def delete(self, product_id: int) -> None:
        with self._lock:
            if self._products.pop(product_id, None) is None:
                raise ProductNotFoundError(product_id)

    def clear(self) -> None:
        with self._lock:
            self._products.clear()


class SqlProductRepository(ProductRepository):
    """Store persisted through SQLModel, one transaction per operation."""

    backend = "sql"

    def __init__(self, database: DbSessionService) -> None:
        self._database = database

    @staticmethod
    def _to_entity(row: ProductTable) -> Product:
        return Product.model_validate(row, from_attributes=True)

    @staticmethod
    def _get_row(session: Session, product_id: int) -> ProductTable:
        if not _ROW_ID_MIN <= product_id <= _ROW_ID_MAX:
            raise ProductNotFoundError(product_id)
        row = session.get(ProductTable, product_id)
        if row is None:
            raise ProductNotFoundError(product_id)
        return row

    def save(self, product: Product) -> Product:
        with self._database.session_scope() as session:
            if product.id is None:
                row = ProductTable(
                    product_id=product.product_id,
                    name=product.name,
                    price=product.price,
                    created_at=product.created_at,
                    updated_at=product.updated_at,
                )
            else:
                row = self._get_row(session, product.id)
                row.name = product.name
                row.price = product.price
            session.add(row)
            session.flush()
            session.refresh(row)
            return self._to_entity(row)

    def find_by_id(self, product_id: int) -> Product:
        with self._database.session_scope() as session:
            return self._to_entity(self._get_row(session, product_id))

    def find_all(self) -> list[Product]:
        with self._database.session_scope() as session:
            rows = session.exec(select(ProductTable).order_by(ProductTable.id)).all()
            return [self._to_entity(row) for row in rows]

    def delete(self, product_id: int) -> None:
        with self._database.session_scope() as session:
            session.delete(self._get_row(session, product_id))

    def clear(self) -> None:
        with self._database.session_scope() as session:
            session.execute(delete(ProductTable))
        logger.info("Cleared products table")
