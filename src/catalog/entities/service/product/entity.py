"""Entity: Product."""

from datetime import UTC, datetime
from typing import Any

from pydantic import Field

from src.catalog.entities.core._base import Entity


class Product(Entity):
    """Product entity representing a catalog item.

    ``product_id`` is the caller's business identifier. It is fixed at
    creation and carries no uniqueness constraint. ``price`` is kept as the
    free-form string the caller sent.
    """

    product_id: str = Field(description="Caller-supplied business identifier")
    name: str = Field(description="Display name")
    price: str = Field(description="Price as supplied by the caller")

    def with_details(self, name: str, price: str) -> "Product":
        """Return a copy carrying a new name and price.

        Identity and ``product_id`` are never changed by an update.
        """
        return self.model_copy(
            update={"name": name, "price": price, "updated_at": datetime.now(UTC)}
        )

    def __eq__(self, other: Any) -> bool:
        """Compare products by business attributes, ignoring timestamps."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.product_id == other.product_id
            and self.name == other.name
            and self.price == other.price
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.product_id,
            self.name,
            self.price,
        ))
