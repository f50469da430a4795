"""Transfer objects for the product HTTP API.

Field names are camelCase on the wire (``productId``) and snake_case in
Python. Both spellings are accepted on input.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.catalog.entities.service.product.entity import Product


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductSaveRequest(_CamelModel):
    """Body of ``POST /products``."""

    product_id: str = Field(description="Caller-supplied business identifier")
    name: str
    price: str


class ProductUpdateRequest(_CamelModel):
    """Body of ``PATCH /products/{id}``. Unknown fields are ignored."""

    name: str
    price: str


class ProductResponse(_CamelModel):
    """Product as returned by the API."""

    id: int
    product_id: str
    name: str
    price: str

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResponse":
        if product.id is None:
            raise ValueError("Cannot build a response for an unsaved product")
        return cls(
            id=product.id,
            product_id=product.product_id,
            name=product.name,
            price=product.price,
        )
