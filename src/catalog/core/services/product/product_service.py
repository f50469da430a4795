from loguru import logger

from src.catalog.entities.service.product import (
    Product,
    ProductRepository,
    ProductResponse,
    ProductSaveRequest,
    ProductUpdateRequest,
)


class ProductService:
    """Use cases for the product resource.

    The only place that maps stored ``Product`` entities to ``ProductResponse``
    transfer objects. ``ProductNotFoundError`` raised by the store propagates
    unchanged.
    """

    def __init__(self, repository: ProductRepository):
        self._repository = repository

    @property
    def repository(self) -> ProductRepository:
        return self._repository

    def create(self, product_id: str, name: str, price: str) -> ProductResponse:
        saved = self._repository.save(
            Product(product_id=product_id, name=name, price=price)
        )
        logger.bind(product=saved.id).info(
            "Created product {} ({})", saved.id, saved.product_id
        )
        return ProductResponse.from_entity(saved)

    def create_product(self, request: ProductSaveRequest) -> ProductResponse:
        return self.create(request.product_id, request.name, request.price)

    def find(self, product_id: int) -> ProductResponse:
        return ProductResponse.from_entity(self._repository.find_by_id(product_id))

    def find_all(self) -> list[ProductResponse]:
        return [
            ProductResponse.from_entity(product)
            for product in self._repository.find_all()
        ]

    def update(self, product_id: int, name: str, price: str) -> ProductResponse:
        """Replace name and price. Identity and ``product_id`` stay as stored."""
        product = self._repository.find_by_id(product_id)
        saved = self._repository.save(product.with_details(name, price))
        logger.bind(product=saved.id).info("Updated product {}", saved.id)
        return ProductResponse.from_entity(saved)

    def update_product(
        self, product_id: int, request: ProductUpdateRequest
    ) -> ProductResponse:
        return self.update(product_id, request.name, request.price)

    def delete(self, product_id: int) -> None:
        self._repository.delete(product_id)
        logger.bind(product=product_id).info("Deleted product {}", product_id)
