"""Product database table model."""

from sqlmodel import Field

from src.catalog.entities.core._base import EntityTable


class ProductTable(EntityTable, table=True):
    """Database persistence model for products.

    This represents how the Product entity is stored in the database.
    AUTOINCREMENT keeps SQLite from handing out the identity of a deleted row
    again.
    """

    __tablename__ = "products"
    __table_args__ = {"sqlite_autoincrement": True}

    product_id: str = Field(index=True)
    name: str
    price: str
