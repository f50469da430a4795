"""Unit tests for ProductService."""

from unittest.mock import Mock

import pytest

from src.catalog.core.exceptions import ProductNotFoundError
from src.catalog.core.services import ProductService
from src.catalog.entities.service.product import (
    ProductRepository,
    ProductResponse,
    ProductSaveRequest,
    ProductUpdateRequest,
)
from tests.fixtures.products import PRODUCT_1, PRODUCT_2, PRODUCT_3


class TestProductService:
    """Test the service against a real in-memory store."""

    def test_create_and_find(self, product_service: ProductService):
        created = product_service.create(
            PRODUCT_1.product_id, PRODUCT_1.name, PRODUCT_1.price
        )

        found = product_service.find(created.id)

        assert isinstance(found, ProductResponse)
        assert found.product_id == PRODUCT_1.product_id
        assert found.name == PRODUCT_1.name
        assert found.price == PRODUCT_1.price

    def test_create_product_from_request(self, product_service: ProductService):
        request = ProductSaveRequest(product_id="P-9", name="Mocha", price="4000")

        created = product_service.create_product(request)

        assert created.product_id == "P-9"
        assert created.id is not None

    def test_find_all_preserves_order(self, product_service: ProductService):
        for product in (PRODUCT_1, PRODUCT_2, PRODUCT_3):
            product_service.create(product.product_id, product.name, product.price)

        products = product_service.find_all()

        assert [p.product_id for p in products] == ["P-001", "P-002", "P-003"]
        assert product_service.find_all() == products

    def test_find_all_empty(self, product_service: ProductService):
        assert product_service.find_all() == []

    def test_update_changes_name_and_price_only(self, product_service: ProductService):
        created = product_service.create("P-1", "Americano", "2500")

        updated = product_service.update(created.id, "Iced Tea", "3000")

        assert updated.id == created.id
        assert updated.product_id == "P-1"
        assert updated.name == "Iced Tea"
        assert updated.price == "3000"
        assert product_service.find(created.id) == updated

    def test_update_product_from_request(self, product_service: ProductService):
        created = product_service.create("P-1", "Americano", "2500")

        updated = product_service.update_product(
            created.id, ProductUpdateRequest(name="Iced Tea", price="3000")
        )

        assert updated.name == "Iced Tea"

    def test_delete(self, product_service: ProductService):
        created = product_service.create("P-1", "Americano", "2500")

        product_service.delete(created.id)

        assert product_service.find_all() == []

    @pytest.mark.parametrize("operation", ["find", "update", "delete"])
    def test_unknown_identity_raises_not_found(
        self, product_service: ProductService, operation: str
    ):
        existing = product_service.create("P-1", "Americano", "2500")
        calls = {
            "find": lambda: product_service.find(404),
            "update": lambda: product_service.update(404, "x", "y"),
            "delete": lambda: product_service.delete(404),
        }

        with pytest.raises(ProductNotFoundError):
            calls[operation]()

        assert product_service.find_all() == [existing]


class TestProductServiceWithMockStore:
    """Test the service's interaction with the store in isolation."""

    @pytest.fixture
    def repository(self) -> Mock:
        return Mock(spec=ProductRepository)

    def test_update_does_not_save_when_lookup_fails(self, repository: Mock):
        repository.find_by_id.side_effect = ProductNotFoundError(5)
        service = ProductService(repository)

        with pytest.raises(ProductNotFoundError):
            service.update(5, "name", "price")

        repository.save.assert_not_called()

    def test_update_saves_copy_with_same_identity(self, repository: Mock):
        stored = PRODUCT_1.model_copy(update={"id": 5})
        repository.find_by_id.return_value = stored
        repository.save.side_effect = lambda product: product
        service = ProductService(repository)

        result = service.update(5, "Iced Tea", "3000")

        saved = repository.save.call_args.args[0]
        assert saved.id == 5
        assert saved.product_id == PRODUCT_1.product_id
        assert saved.name == "Iced Tea"
        assert result.name == "Iced Tea"

    def test_delete_propagates_not_found(self, repository: Mock):
        repository.delete.side_effect = ProductNotFoundError(8)
        service = ProductService(repository)

        with pytest.raises(ProductNotFoundError, match="Product 8 not found"):
            service.delete(8)

    def test_store_errors_propagate_from_create(self, repository: Mock):
        repository.save.side_effect = RuntimeError("disk full")
        service = ProductService(repository)

        with pytest.raises(RuntimeError, match="disk full"):
            service.create("P-1", "Americano", "2500")
